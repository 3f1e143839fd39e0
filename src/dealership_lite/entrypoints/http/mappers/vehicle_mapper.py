from __future__ import annotations

from decimal import Decimal

from dealership_lite.domain.vehicle import ColorOption, FilterCriteria, Paging, Vehicle
from dealership_lite.entrypoints.http.dtos.vehicles import (
    CatalogOptionsDTO,
    ColorOptionDTO,
    VehicleCardDTO,
    VehicleDetailDTO,
    VehiclesSearchQueryDTO,
    VehicleSearchResponseDTO,
)
from dealership_lite.use_cases.get_catalog_options import CatalogOptions
from dealership_lite.use_cases.search_vehicle_catalog import (
    SearchVehicleCatalogRequest,
    SearchVehicleCatalogResponse,
)


def _money(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


class VehicleMapper:
    """Maps between REST DTOs and domain models for the vehicle catalog."""

    @staticmethod
    def to_domain_criteria(dto: VehiclesSearchQueryDTO) -> FilterCriteria:
        """
        Converts query params to domain criteria, handling Decimal conversion.

        The search token is trimmed so "  " and "" behave the same.
        """
        return FilterCriteria(
            brand=dto.brand or None,
            fuel_type=dto.fuel_type or None,
            price_min=Decimal(dto.price_min) if dto.price_min else None,
            price_max=Decimal(dto.price_max) if dto.price_max else None,
            search=dto.search.strip(),
        )

    @staticmethod
    def to_domain_request(dto: VehiclesSearchQueryDTO) -> SearchVehicleCatalogRequest:
        return SearchVehicleCatalogRequest(
            criteria=VehicleMapper.to_domain_criteria(dto),
            paging=Paging(offset=dto.offset, limit=dto.limit),
        )

    @staticmethod
    def to_card(vehicle: Vehicle) -> VehicleCardDTO:
        return VehicleCardDTO(
            id=vehicle.id,
            name=vehicle.name,
            brand=vehicle.brand,
            price=str(vehicle.price),  # Decimal → str at boundary
            year=vehicle.year,
            fuel_type=vehicle.fuel_type,
            mileage=vehicle.mileage,
            in_stock=vehicle.in_stock,
            image=vehicle.image,
        )

    @staticmethod
    def to_detail(vehicle: Vehicle) -> VehicleDetailDTO:
        return VehicleDetailDTO(
            **VehicleMapper.to_card(vehicle).model_dump(),
            transmission=vehicle.transmission,
            engine=vehicle.engine,
            horsepower=vehicle.horsepower,
            exterior_color=vehicle.exterior_color,
            interior_color=vehicle.interior_color,
            body_type=vehicle.body_type,
            description=vehicle.description,
            features=list(vehicle.features),
            gallery=list(vehicle.gallery),
        )

    @staticmethod
    def to_search_response(
        result: SearchVehicleCatalogResponse,
        offset: int,
        limit: int,
    ) -> VehicleSearchResponseDTO:
        return VehicleSearchResponseDTO(
            vehicles=[VehicleMapper.to_card(v) for v in result.vehicles],
            total=result.total_count,
            offset=offset,
            limit=limit,
        )

    @staticmethod
    def to_color(option: ColorOption) -> ColorOptionDTO:
        return ColorOptionDTO(
            value=option.value,
            label=option.label,
            price_delta=str(option.price_delta),
        )

    @staticmethod
    def to_options(options: CatalogOptions) -> CatalogOptionsDTO:
        return CatalogOptionsDTO(
            brands=list(options.brands),
            fuel_types=list(options.fuel_types),
            price_min=_money(options.price_min),
            price_max=_money(options.price_max),
            colors=[VehicleMapper.to_color(c) for c in options.colors],
        )
