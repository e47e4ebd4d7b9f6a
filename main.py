"""
Extended Warranty - Main Entry Point

Demo runner for the extended warranty rules. It seeds a product catalog
with dummy products and runs the issuing scenarios. Single warranties
issued with --issue go to the stores selected by WARRANTY_STORE_BACKEND.
"""

import sys
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from dateutil import parser as date_parser

from extended_warranty import Product, WarrantyError, WarrantyService
from extended_warranty.clock import fixed_clock, system_clock
from extended_warranty.config import WarrantyConfig, build_stores
from extended_warranty.logging_config import configure_logging
from extended_warranty.stores import InMemoryWarrantyStore

logger = logging.getLogger(__name__)


# =============================================================================
# DUMMY TEST DATA - Pre-populated product catalog
# =============================================================================

DUMMY_PRODUCTS = [
    Product(code="F01TSA0150", name="Lenovo Laptop", price="780000"),
    Product(code="S01H1AT51", name="Washing Machine", price="200000"),
    Product(code="T4B3L3T4", name="Tablet", price="500000"),
    Product(code="FE1TSA0A50", name="Sound Bar", price="350000"),
]


# =============================================================================
# SCENARIOS
# =============================================================================

SCENARIOS = [
    {
        "name": "High tier product gets a 20% warranty",
        "code": "F01TSA0150",
        "client": "Maria Gomez",
        "expected": "ok"
    },
    {
        "name": "Low tier product gets a 10% warranty",
        "code": "S01H1AT51",
        "client": "Carlos Ruiz",
        "expected": "ok"
    },
    {
        "name": "Threshold price uses the low tier",
        "code": "T4B3L3T4",
        "client": "Ana Torres",
        "expected": "ok"
    },
    {
        "name": "Same product twice is rejected",
        "code": "F01TSA0150",
        "client": "Maria Gomez",
        "expected": "ALREADY_HAS_WARRANTY"
    },
    {
        "name": "Code with three vowels is not eligible",
        "code": "FE1TSA0A50",
        "client": "Luis Perez",
        "expected": "NOT_ELIGIBLE"
    },
    {
        "name": "Missing client name",
        "code": "S01H1AT51",
        "client": "",
        "expected": "REQUIRED_PARAMETERS"
    },
    {
        "name": "Unknown product",
        "code": "ZZZ999",
        "client": "Luis Perez",
        "expected": "PRODUCT_NOT_FOUND"
    },
]


class DemoRunner:
    """Runs warranty scenarios against a seeded catalog."""

    def __init__(self, config: WarrantyConfig, request_date: Optional[datetime] = None):
        self.product_store, warranty_store = build_stores(config)
        for product in DUMMY_PRODUCTS:
            self.product_store.add(product)

        self.clock = fixed_clock(request_date) if request_date else system_clock
        self.service = WarrantyService(self.product_store, warranty_store, clock=self.clock)
        logger.info(f"Demo runner initialized - backend={config.store_backend}")

    def issue(self, code: str, client: str, service: Optional[WarrantyService] = None) -> Dict[str, Any]:
        """Issue one warranty and return a result payload."""
        service = service or self.service
        try:
            warranty = service.generate(code, client)
        except WarrantyError as e:
            return e.to_dict()
        return {"status": "ok", "data": warranty.to_dict()}

    def run_scenarios(self) -> List[Dict[str, Any]]:
        """
        Run all scenarios and print a summary.

        Scenarios expect no prior warranties, so they run against a fresh
        in-memory warranty store; the configured store is left untouched.
        """
        scenario_service = WarrantyService(self.product_store, InMemoryWarrantyStore(), clock=self.clock)

        print("\n" + "=" * 70)
        print("  EXTENDED WARRANTY - Running All Scenarios")
        print("=" * 70)

        summary = []
        for scenario in SCENARIOS:
            result = self.issue(scenario["code"], scenario["client"], service=scenario_service)
            outcome = result.get("error_code", result["status"])
            passed = outcome == scenario["expected"]
            summary.append({"scenario": scenario["name"], "outcome": outcome, "passed": passed})

            print(f"\n{scenario['name']}")
            print(f"  Code: {scenario['code']!r}, Client: {scenario['client']!r}")
            if result["status"] == "ok":
                data = result["data"]
                print(f"  Price: {data['warranty_price']}, Expires: {data['expiration_date'][:10]}")
            else:
                print(f"  Rejected: {result['message']}")

        print("\n" + "=" * 70)
        print("  SUMMARY")
        print("=" * 70)
        for s in summary:
            status_icon = "✓" if s["passed"] else "✗"
            print(f"  {status_icon} {s['scenario']} ({s['outcome']})")
        print("=" * 70 + "\n")
        return summary


def print_usage():
    print("Usage:")
    print("  python main.py                          - Run all scenarios")
    print("  python main.py --date YYYY-MM-DD        - Run scenarios with a fixed request date")
    print("  python main.py --issue CODE CLIENT      - Issue a single warranty")
    print("  python main.py --help                   - Show this help")


def main(argv: List[str]) -> int:
    """Main entry point."""
    config = WarrantyConfig.from_env()
    configure_logging(config.log_level)

    request_date = None
    if "--help" in argv:
        print_usage()
        return 0
    if "--date" in argv:
        index = argv.index("--date")
        if index + 1 >= len(argv):
            print("--date requires a value")
            return 2
        try:
            request_date = date_parser.isoparse(argv[index + 1])
        except ValueError:
            print(f"Invalid date: {argv[index + 1]}")
            return 2

    runner = DemoRunner(config, request_date=request_date)

    if "--issue" in argv:
        index = argv.index("--issue")
        args = argv[index + 1:index + 3]
        if len(args) < 2:
            print_usage()
            return 2
        result = runner.issue(args[0], args[1])
        print(result)
        return 0 if result["status"] == "ok" else 1

    summary = runner.run_scenarios()
    return 0 if all(s["passed"] for s in summary) else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
