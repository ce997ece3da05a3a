#!/usr/bin/env python3
"""
Standalone policy plan-limit validation script.

Validates policy files (JSON or YAML) against the limits of one service plan:
  - recurring_schedule count
  - specific_date count
  - scaling_rules count

Exit code 0 if all policies fit the plan, 1 if any issues found.

Usage:
    python scripts/validate-policies.py --plan-id autoscaler-free-plan-id policy.json
    python scripts/validate-policies.py --catalog /custom/catalog.json --plan-id p1 policies/
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

# Ensure the backend package is importable when run from the project root
PROJECT_ROOT = Path(__file__).parent.parent
BACKEND_DIR = PROJECT_ROOT / "backend"
sys.path.insert(0, str(BACKEND_DIR))

from autoscaler_broker.core.exceptions import CatalogError  # noqa: E402
from autoscaler_broker.plans.catalog import PlanCatalog, load_plan_catalog  # noqa: E402
from autoscaler_broker.plans.validator import PolicyValidator  # noqa: E402

POLICY_SUFFIXES = {".json", ".yaml", ".yml"}


def collect_policy_files(paths: list[Path]) -> list[Path]:
    """Expand directories into the policy files they contain."""
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob("*") if p.suffix in POLICY_SUFFIXES))
        else:
            files.append(path)
    return files


def validate_policies(
    files: list[Path], catalog: PlanCatalog, service_id: str, plan_id: str
) -> list[str]:
    """
    Validate every policy file against the plan.

    Returns a list of error strings; empty list means all files are valid.
    Reports ALL failures, not just the first one found.
    """
    errors: list[str] = []
    validator = PolicyValidator(catalog)

    if catalog.get_plan(service_id, plan_id) is None:
        print(f"WARNING: Plan '{plan_id}' of service '{service_id}' is not in the catalog.")
        print("         No limits apply; every policy will pass.")

    for policy_file in files:
        # JSON is valid YAML, so one loader covers both formats
        try:
            with open(policy_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError) as e:
            errors.append(f"[{policy_file}] Cannot read file: {e}")
            continue
        except yaml.YAMLError as e:
            errors.append(f"[{policy_file}] Parse error: {e}")
            continue

        if data is not None and not isinstance(data, dict):
            errors.append(
                f"[{policy_file}] Expected an object at the top level, got {type(data).__name__}"
            )
            continue

        for violation in validator.validate(data, service_id, plan_id):
            errors.append(f"[{policy_file}] {violation.property}: {violation.message}")

    return errors


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Validate autoscaling policies against service plan limits"
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Policy files or directories")
    parser.add_argument("--plan-id", required=True, help="Catalog plan ID")
    parser.add_argument(
        "--service-id",
        default="autoscaler-guid",
        help="Catalog service ID (default: autoscaler-guid)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Catalog JSON file (default: bundled catalog)",
    )
    args = parser.parse_args()

    try:
        catalog = PlanCatalog.from_file(args.catalog) if args.catalog else load_plan_catalog()
    except CatalogError as e:
        print(f"ERROR: {e.message}")
        return 1

    files = collect_policy_files(args.paths)
    if not files:
        print("No policy files found")
        return 0

    print(f"Validating {len(files)} policy file(s) against plan: {args.plan_id}")
    errors = validate_policies(files, catalog, args.service_id, args.plan_id)

    if errors:
        print(f"\nFAILED: {len(errors)} plan limit violation(s) found:\n")
        for error in errors:
            print(f"  {error}")
        return 1

    print(f"OK: All {len(files)} policy file(s) fit the plan")
    return 0


if __name__ == "__main__":
    sys.exit(main())
