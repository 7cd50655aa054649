"""Run one alert sweep; meant to be scheduled (cron, systemd timer)."""

from __future__ import annotations

import argparse
import logging

from app.application.use_cases import run_alert_sweep
from app.infrastructure.database import SessionLocal, initialize_database
from app.main import configure_logging

logger = logging.getLogger("sweep_alerts")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check every active alert and push notifications for new listings.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print one line per checked alert.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()
    initialize_database()

    session = SessionLocal()
    try:
        report = run_alert_sweep(session)
    finally:
        session.close()

    print(
        f"Alertes vérifiées: {report.alerts_checked}, "
        f"ignorées: {report.alerts_skipped}, "
        f"notifications: {report.notifications_sent}, "
        f"biens trouvés: {report.listings_found}"
    )
    if args.verbose:
        for result in report.results:
            state = "ok" if result.success else f"échec ({result.error})"
            print(f"  #{result.alert_id} {result.alert_name}: {result.new_listings} bien(s), {state}")
    if any(not result.success for result in report.results):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
