import argparse
import json
import sys

from pydantic import ValidationError

from report_scoring.pipeline import score_report

from .io_utils import load_payload, rejected
from .mapping import map_detections
from .models import DetectionInput, ScoreRequest, counts_to_dict


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pollution Report → Weight, XP, Fraud and Impact Scores"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    map_cmd = sub.add_parser("map", help="Map raw detector labels to pollution categories")
    map_cmd.add_argument("source", help="Path to detection JSON (raw_label_counts, people_count, scene_labels)")

    score = sub.add_parser("score", help="Score a report: weight, XP, severity, fraud, impact, fact")
    score.add_argument("source", help="Path to score request JSON")

    validate = sub.add_parser("validate", help="Validate a score request JSON file")
    validate.add_argument("source", help="Path to score request JSON")

    return parser


def _emit(payload) -> None:
    json.dump(payload, fp=sys.stdout, indent=2)
    print()


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        payload = load_payload(args.source)
        if args.command == "map":
            detection = DetectionInput.model_validate(payload)
            _emit({"category_counts": counts_to_dict(map_detections(detection.raw_label_counts))})
        elif args.command == "score":
            request = ScoreRequest.model_validate(payload)
            _emit(score_report(request).to_dict())
        elif args.command == "validate":
            request = ScoreRequest.model_validate(payload)
            _emit(request.model_dump(mode="json"))
    except ValidationError as exc:
        _emit(rejected(f"schema_validation_failed: {exc}"))
        sys.exit(1)
    except json.JSONDecodeError as exc:
        _emit(rejected(f"invalid_json: {exc}"))
        sys.exit(1)
    except ValueError as exc:
        _emit(rejected(str(exc)))
        sys.exit(1)


if __name__ == "__main__":
    main()
