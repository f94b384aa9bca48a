import sys
from typing import TextIO

from src.huffman.codec import CodecResult, huffman_decode, huffman_encode
from src.pipeline.config import RunConfig
from src.utils.file_utils import read_all_bytes, write_all_bytes


def process_bytes(data: bytes, action: str) -> CodecResult:
    """
    Dispatch on the configured action.
    """
    action = action.lower()
    if action == "encode":
        return huffman_encode(data)
    if action == "decode":
        return huffman_decode(data)
    raise ValueError(f"Unsupported action: {action}")


def report(result: CodecResult, log: TextIO) -> None:
    for value in (result.initial_size, result.processed_size, result.aux_size):
        print(value, file=log)


def run(cfg: RunConfig, log: TextIO | None = None) -> CodecResult:
    """
    Read the input file, run the codec, write the output file and print the
    three size counters to `log` (stdout by default).
    """
    if log is None:
        log = sys.stdout
    cfg.validate()

    data = read_all_bytes(cfg.input_path)
    result = process_bytes(data, cfg.action)
    write_all_bytes(cfg.output_path, result.data)
    report(result, log)
    return result
