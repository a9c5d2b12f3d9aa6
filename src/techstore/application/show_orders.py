"""Application service: Show Orders use case (query)."""

from __future__ import annotations

from techstore.application.dto import OrderDTO
from techstore.application.mappers import order_to_dto
from techstore.domain.repository.order_repository import OrderRepository


class ShowOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [order_to_dto(o) for o in self._order_repo.list_all()]
