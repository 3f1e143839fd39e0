from __future__ import annotations

from dealership_lite.entrypoints.http.dtos.admin import (
    AdminDashboardDTO,
    OrderRecordDTO,
    SellRequestRecordDTO,
    ServiceRecordDTO,
)
from dealership_lite.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from dealership_lite.use_cases.admin_dashboard import AdminDashboard


class AdminMapper:
    @staticmethod
    def to_response(dashboard: AdminDashboard) -> AdminDashboardDTO:
        return AdminDashboardDTO(
            inventory=[VehicleMapper.to_card(v) for v in dashboard.inventory],
            orders=[
                OrderRecordDTO(
                    id=o.id,
                    customer=o.customer,
                    car=o.car,
                    date=o.date,
                    status=o.status,
                    amount=str(o.amount),
                )
                for o in dashboard.orders
            ],
            services=[
                ServiceRecordDTO(
                    id=s.id, customer=s.customer, car=s.car, type=s.type, date=s.date, status=s.status
                )
                for s in dashboard.services
            ],
            sell_requests=[
                SellRequestRecordDTO(
                    id=r.id, customer=r.customer, car=r.car, year=r.year, date=r.date, status=r.status
                )
                for r in dashboard.sell_requests
            ],
        )
