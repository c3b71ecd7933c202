"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopease.application.dto import CatalogReport, ProductLineDTO
from shopease.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, check_id: str | None = None) -> CatalogReport:
        """Enumerate the catalog, optionally checking that one product id exists.

        Useful when a restored cart points at a product that has since
        been removed from the catalog.
        """
        products = [
            ProductLineDTO(
                id=p.id,
                name=p.name,
                slug=p.slug,
                in_stock=p.in_stock,
                price=str(p.price),
            )
            for p in self._product_repo.list_all()
        ]
        if check_id is None:
            return CatalogReport(products=products)
        return CatalogReport(
            products=products,
            checked_id=check_id,
            checked_found=any(p.id == check_id for p in products),
        )
