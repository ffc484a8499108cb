"""Purchase Deadlines MCP Server - FastMCP HTTP

Exposes deadline arithmetic and urgency classification as tools. Stateless
tools take purchase records in the request; store-backed tools work on the
server's ``PurchaseStore``.
"""
import logging
from typing import Any, Dict, List, Optional

from fastmcp import FastMCP
from pydantic import ValidationError

from ..compute import service
from ..compute.defaults import resolve_policy
from ..config import TrackerConfig, config
from ..models.purchase import CreatePurchaseInput, PurchaseStatus
from ..store import PurchaseNotFoundError, PurchaseStore

logger = logging.getLogger(__name__)


class DeadlineTools:
    """Tool implementations bound to one purchase store."""

    def __init__(self, store: PurchaseStore):
        self.store = store

    def _records(self, include_archived: bool) -> List[Dict[str, Any]]:
        status = None if include_archived else PurchaseStatus.ACTIVE
        return [p.model_dump() for p in self.store.list(status=status)]

    def tracked_overview(self, reference_date: Optional[str] = None, include_archived: bool = False) -> dict:
        """Urgency overview of every tracked purchase, grouped into urgent / upcoming / reference."""
        return service.urgency_overview(self._records(include_archived), reference_date)

    def tracked_action_items(self, reference_date: Optional[str] = None) -> dict:
        """Overdue returns, returns due within 7 days and warranties expiring within 30 days."""
        return service.action_items_overview(self._records(include_archived=False), reference_date)

    def add_purchase(
        self,
        name: str,
        purchase_date: str,
        store: Optional[str] = None,
        price: Optional[float] = None,
        return_window_days: Optional[int] = None,
        warranty_months: Optional[int] = None,
        serial_number: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> dict:
        """Track a new purchase. Unset windows fall back to the store's policy, then the defaults."""
        policy = resolve_policy(store)
        try:
            data = CreatePurchaseInput(
                name=name,
                purchase_date=purchase_date,
                store=store,
                price=price,
                return_window_days=policy.return_days if return_window_days is None else return_window_days,
                warranty_months=policy.warranty_months if warranty_months is None else warranty_months,
                serial_number=serial_number,
                notes=notes,
            )
        except ValidationError as e:
            return {"status": "error", "error_code": "INVALID_RECORD", "message": str(e)}

        purchase = self.store.create(data)
        return service.classify_purchase(purchase.model_dump())

    def archive_tracked_purchase(self, purchase_id: str) -> dict:
        """Archive a purchase so it no longer counts as actionable."""
        try:
            purchase = self.store.archive(purchase_id)
        except PurchaseNotFoundError:
            return {
                "status": "error",
                "error_code": "PURCHASE_NOT_FOUND",
                "message": f"No purchase with id: {purchase_id}",
            }
        return service.classify_purchase(purchase.model_dump())


def create_server(store: Optional[PurchaseStore] = None, settings: Optional[TrackerConfig] = None) -> FastMCP:
    """Build the FastMCP server with stateless and store-backed tools registered."""
    settings = settings or config
    if store is None:
        store = PurchaseStore.from_json(settings.data_path) if settings.data_path else PurchaseStore()

    mcp = FastMCP(settings.server.name)

    for fn in (
        service.calculate_deadlines,
        service.calculate_deadline_status,
        service.classify_purchase,
        service.urgency_overview,
        service.action_items_overview,
        service.lookup_store_defaults,
    ):
        mcp.tool(fn)

    tools = DeadlineTools(store)
    for method in (
        tools.tracked_overview,
        tools.tracked_action_items,
        tools.add_purchase,
        tools.archive_tracked_purchase,
    ):
        mcp.tool(method)

    logger.info(f"Deadline server ready - name={settings.server.name}, purchases={len(store)}")
    return mcp


def run(settings: Optional[TrackerConfig] = None) -> None:
    settings = settings or config
    mcp = create_server(settings=settings)
    logger.info(f"Serving on {settings.server.get_url()}")
    mcp.run(transport="http", host=settings.server.host, port=settings.server.port)


if __name__ == "__main__":
    logging.basicConfig(level=config.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    run()
