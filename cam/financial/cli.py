import json
import sys

from cam.config.defaults import ASSUMPTION_FIELDS, assumptions_from_mapping
from cam.errors import DomainError
from cam.exports.writers import to_record
from cam.financial.engine import evaluate_financials
from cam.financial.sensitivity import evaluate_sensitivity

USAGE = "Usage: python -m cam.financial.cli [field=value ...] [--sensitivity]"


def parse_args(argv):
    overrides = {}
    with_sensitivity = False
    for arg in argv:
        if arg == "--sensitivity":
            with_sensitivity = True
            continue
        name, sep, value = arg.partition("=")
        if not sep or name not in ASSUMPTION_FIELDS:
            raise ValueError(f"unrecognised argument: {arg}")
        overrides[name] = value
    return overrides, with_sensitivity


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    try:
        overrides, with_sensitivity = parse_args(argv)
        a = assumptions_from_mapping(overrides)
        out = {"assumptions": to_record(a), "financials": to_record(evaluate_financials(a))}
        if with_sensitivity:
            out["sensitivity"] = to_record(evaluate_sensitivity(a))
    except DomainError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)
    except ValueError as e:
        print(f"{e}\n{USAGE}", file=sys.stderr)
        sys.exit(2)
    print(json.dumps(out, indent=2))


if __name__ == "__main__":
    main()
