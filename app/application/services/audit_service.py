"""Stock audit — compares the Store table with what the ledgers say it should hold.

Store is kept up to date incrementally and clamps at zero, which can hide lost
updates. This report recomputes every product from history:

    expected = purchased feet - sold feet
    drift    = store feet - expected
"""

from datetime import datetime

import pytz
import structlog

from app.application.services import stock_ledger
from app.config import get_settings
from app.domain.repositories.purchase_repository import PurchaseRepository
from app.domain.repositories.sale_repository import SaleRepository
from app.domain.repositories.store_repository import StoreRepository
from app.domain.schemas.store import StockAuditReport, StockDrift

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)
logger = structlog.get_logger(__name__)

DRIFT_EPSILON = 1e-6


def reconcile(
    purchases: PurchaseRepository,
    sales: SaleRepository,
    stores: StoreRepository,
) -> StockAuditReport:
    """Per-product drift between Store.feet and the purchase/sale history. Read-only."""
    purchased = purchases.feet_by_product()
    sold = sales.feet_by_product()
    store_feet = {s.product_code: s.feet for s in stores.list_all()}

    rows = []
    for code in sorted(set(purchased) | set(sold) | set(store_feet)):
        expected = purchased.get(code, 0.0) - sold.get(code, 0.0)
        current = store_feet.get(code)
        drift = (current or 0.0) - expected
        skipped = stock_ledger.skipped_reversals.get(code, 0)
        rows.append(
            StockDrift(
                product_code=code,
                purchased_feet=round(purchased.get(code, 0.0), 4),
                sold_feet=round(sold.get(code, 0.0), 4),
                expected_feet=round(expected, 4),
                store_feet=round(current, 4) if current is not None else None,
                drift=round(drift, 4),
                skipped_reversals=skipped,
                flagged=abs(drift) > DRIFT_EPSILON or skipped > 0,
            )
        )

    flagged = sum(1 for r in rows if r.flagged)
    if flagged:
        logger.warning("Stock drift detected", flagged=flagged, products=len(rows))

    return StockAuditReport(generated_at=datetime.now(tz), products=rows, flagged_count=flagged)
