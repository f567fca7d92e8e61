"""Example: run a month's payroll through the service layer (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib
import sys

from config import get_settings_module

from hr_dashboard.container import build_container
from hr_dashboard.tenancy.context import tenant_key


def main(email: str, month: str):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    engine = container.for_tenant(tenant_key(email)).payroll_engine

    processed = engine.process_all_payroll(month)
    summary = engine.summarize_month(month)
    print(f"processed={processed} total={summary.total_net_salary} paid={summary.paid}")


if __name__ == "__main__":
    main(sys.argv[1], sys.argv[2])
