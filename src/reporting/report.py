from __future__ import annotations

import argparse
import csv
import json
import statistics
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from dahuffman import HuffmanCodec

from src.huffman.codec import huffman_decode, huffman_encode

REPORT_COLUMNS = [
    "input_path",
    "original_size_bytes",
    "compressed_size_bytes",
    "payload_size_bytes",
    "aux_size_bytes",
    "reference_payload_bytes",
    "compression_ratio",
    "roundtrip_ok",
]


def _iter_files(root: Path) -> Iterable[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())


def _format_csv_value(value: object) -> object:
    if value is None:
        return ""
    return value


def reference_payload_size(data: bytes) -> Optional[int]:
    """
    Payload size produced by dahuffman for the same data (no table stored,
    one extra end-of-file symbol). None for empty input.
    """
    if not data:
        return None
    codec = HuffmanCodec.from_data(data)
    return len(codec.encode(data))


def measure_file(input_file: Path, input_root: Path) -> Dict[str, object]:
    data = input_file.read_bytes()
    encoded = huffman_encode(data)
    decoded = huffman_decode(encoded.data)

    original_size = len(data)
    return {
        "input_path": str(input_file.relative_to(input_root)),
        "original_size_bytes": original_size,
        "compressed_size_bytes": len(encoded.data),
        "payload_size_bytes": encoded.processed_size,
        "aux_size_bytes": encoded.aux_size,
        "reference_payload_bytes": reference_payload_size(data),
        "compression_ratio": (len(encoded.data) / original_size) if original_size else None,
        "roundtrip_ok": decoded.data == data,
    }


def generate_report(
    input_root: Path,
    report_dir: Path,
    formats: Sequence[str] = ("csv", "json"),
) -> Dict[str, object]:
    input_root = input_root.resolve()
    report_dir = report_dir.resolve()

    rows: List[Dict[str, object]] = []
    for input_file in _iter_files(input_root):
        print("Processing:", input_file)
        rows.append(measure_file(input_file, input_root))

    total_original_bytes = sum(row["original_size_bytes"] for row in rows)
    total_compressed_bytes = sum(row["compressed_size_bytes"] for row in rows)
    ratios = [row["compression_ratio"] for row in rows if row["compression_ratio"] is not None]
    roundtrip_count = sum(1 for row in rows if row["roundtrip_ok"])

    summary = {
        "total_files": len(rows),
        "roundtrip_count": roundtrip_count,
        "total_original_bytes": total_original_bytes,
        "total_compressed_bytes": total_compressed_bytes,
        "overall_ratio": (total_compressed_bytes / total_original_bytes) if total_original_bytes else 0.0,
        "median_ratio": statistics.median(ratios) if ratios else 0.0,
    }

    meta = {
        "input_root": str(input_root),
        "report_dir": str(report_dir),
        "generated_at_utc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }

    report_dir.mkdir(parents=True, exist_ok=True)
    formats = [fmt.lower() for fmt in formats]

    if "csv" in formats:
        csv_path = report_dir / "report.csv"
        with csv_path.open("w", newline="", encoding="utf-8") as csv_file:
            writer = csv.DictWriter(csv_file, fieldnames=REPORT_COLUMNS)
            writer.writeheader()
            for row in rows:
                writer.writerow({k: _format_csv_value(row.get(k)) for k in REPORT_COLUMNS})

    if "json" in formats:
        json_path = report_dir / "report.json"
        report_payload = {"meta": meta, "summary": summary, "files": rows}
        json_path.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")

    return {"meta": meta, "summary": summary, "files": rows}


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compress every file under a folder and report the sizes.",
    )
    parser.add_argument("--input-root", required=True, help="Folder with the files to measure.")
    parser.add_argument(
        "--report-dir",
        default="report",
        help="Output directory for reports (default: ./report).",
    )
    parser.add_argument(
        "--formats",
        default="csv,json",
        help="Comma-separated list of formats: csv,json (default: csv,json).",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    input_root = Path(args.input_root)
    report_dir = Path(args.report_dir)
    formats = [fmt.strip() for fmt in args.formats.split(",") if fmt.strip()]
    generate_report(
        input_root=input_root,
        report_dir=report_dir,
        formats=formats,
    )
    print(f"Report written to {report_dir}")


if __name__ == "__main__":
    main()
