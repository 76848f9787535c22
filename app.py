import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Dict, List, Optional

import cv2

from history import AssessmentHistory
from pipeline import ScreeningResult, assess

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Facial asymmetry and posture screening for possible stroke signs.",
    )
    parser.add_argument("images", nargs="*", help="Still images to analyze")
    parser.add_argument(
        "--landmarks",
        action="append",
        default=[],
        metavar="FILE",
        help='JSON snapshot {"face": [...], "pose": [...]} to analyze instead of an image',
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--min-detection-confidence", type=float, default=0.5)
    parser.add_argument("--log-level", default="WARNING")
    return parser


def load_snapshot(path: str) -> Dict[str, Optional[list]]:
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected an object with 'face' and/or 'pose'")
    return {"face": data.get("face"), "pose": data.get("pose")}


def result_to_dict(source: str, result: ScreeningResult) -> Dict[str, object]:
    assessment = result.assessment
    return {
        "source": source,
        "asymmetry_metrics": asdict(result.asymmetry),
        "posture_metrics": asdict(result.posture),
        "face_detected": result.face_sufficient,
        "pose_detected": result.pose_sufficient,
        "risk_level": None if assessment is None else assessment.risk_level.value,
        "score": None if assessment is None else assessment.score,
        "findings": [] if assessment is None else list(assessment.findings),
    }


def format_result(source: str, result: ScreeningResult) -> List[str]:
    lines = [f"== {source}"]
    if not result.face_sufficient:
        lines.append("Warning: no face landmarks, facial metrics default to 0")
    if not result.pose_sufficient:
        lines.append("Warning: no pose landmarks, posture metrics default to 0")
    for name, value in asdict(result.asymmetry).items():
        lines.append(f"{name}: {value * 100:.1f}%")
    for name, value in asdict(result.posture).items():
        lines.append(f"{name}: {value * 100:.1f}%")
    assessment = result.assessment
    if assessment is None:
        lines.append("Risk: not assessed (face and pose are both required)")
        return lines
    lines.append(f"Risk: {assessment.risk_level.value.upper()} (score {assessment.score})")
    for finding in assessment.findings:
        lines.append(f"- {finding}")
    return lines


def analyze_images(paths: List[str], min_detection_confidence: float) -> List[tuple]:
    if not paths:
        return []
    # MediaPipe graphs are only needed for image input.
    from landmark_detection import LandmarkDetector

    results = []
    with LandmarkDetector(
        min_detection_confidence=min_detection_confidence,
        static_image_mode=True,
    ) as detector:
        for path in paths:
            frame = cv2.imread(path)
            if frame is None:
                print(f"Error: Could not read image {path}")
                continue
            detected = detector.process(frame)
            results.append((path, assess(detected.face, detected.pose)))
    return results


def analyze_snapshots(paths: List[str]) -> List[tuple]:
    results = []
    for path in paths:
        try:
            snapshot = load_snapshot(path)
            results.append((path, assess(snapshot["face"], snapshot["pose"])))
        except (OSError, ValueError, TypeError) as e:
            print(f"Error: Could not load landmarks from {path}: {e}")
    return results


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
    )

    if not args.images and not args.landmarks:
        print("Error: Provide at least one image or --landmarks file.")
        return 2

    results = analyze_snapshots(args.landmarks) + analyze_images(args.images, args.min_detection_confidence)
    if not results:
        return 1

    history = AssessmentHistory()
    for _, result in results:
        if result.assessment is not None:
            history.add(result.asymmetry, result.posture, result.assessment.risk_level)
    stats = history.stats()
    logger.info("Analyzed %d input(s): %s", len(results), stats)

    if args.json:
        print(json.dumps([result_to_dict(source, result) for source, result in results], indent=2))
    else:
        for source, result in results:
            print("\n".join(format_result(source, result)))
            print()
        if len(results) > 1:
            print(f"Summary: {len(results)} analyzed, high={stats['high']} medium={stats['medium']} low={stats['low']} not_assessed={len(results) - stats['total']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
