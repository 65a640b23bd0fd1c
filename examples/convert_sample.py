from pathlib import Path
import sys

# Ensure the repository root (with the 'csv2qif' package) is on PYTHONPATH when run from examples/
sys.path.append(str(Path(__file__).resolve().parents[1]))

from csv2qif.config import ConversionConfig, MemoOptions
from csv2qif.convert import convert_file


def main():
    examples_dir = Path(__file__).resolve().parent
    config = ConversionConfig(
        input_path=examples_dir / "ing_sample.csv",
        memo=MemoOptions(include_code=True, include_kind=True, include_comment=True),
    )

    result = convert_file(config)
    print(f"Wrote {result.records_written} transactions to {result.output_path}")


if __name__ == "__main__":
    main()
