from utils.point_io import load_point_files
from utils.image_io import ensure_output_dir
from detectors.brute_collinear import BruteCollinearPoints
from detectors.errors import CollinearError

from visualization.save_outputs import save_all_outputs

from config import (
    INPUT_POINTS_PATTERN,
    OUTPUT_FOLDER,
)


def process_points(points, name: str, output_dir: str = OUTPUT_FOLDER):
    """
    Runs the complete pipeline for one point set:
      1. Brute-force collinear detection
      2. Print the segments found
      3. Save all outputs (points image, segments image, segment list)

    Returns the detector, or None if the point set was rejected.
    """

    print(f"\n=== Processing point set: {name} ({len(points)} points) ===")

    # ------------------------------
    # STEP 1: DETECTION
    # ------------------------------
    try:
        collinear = BruteCollinearPoints(points)
    except CollinearError as error:
        print(f"[ERROR] {name}: {error}")
        return None

    segments = collinear.segments()
    if not segments:
        print(f"[WARN] No segments found in {name}.")

    # ------------------------------
    # STEP 2: REPORT
    # ------------------------------
    for segment in segments:
        print(segment)

    # ------------------------------
    # STEP 3: SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=output_dir,
        name=name,
        points=points,
        segments=segments,
    )

    print(f"[OK] Finished {name}: {collinear.number_of_segments()} segment(s)")
    return collinear


def main():
    """
    Main entry point:
      - Loads point files
      - Processes each one independently
      - Saves output files
    """
    ensure_output_dir(OUTPUT_FOLDER)

    point_sets, names = load_point_files(INPUT_POINTS_PATTERN)
    if not point_sets:
        print(f"[ERROR] No point files matched pattern: {INPUT_POINTS_PATTERN}")
        return

    for points, name in zip(point_sets, names):
        process_points(points, name, output_dir=OUTPUT_FOLDER)

    print("\n=== All point sets processed ===")


if __name__ == "__main__":
    main()
