from dataclasses import dataclass, fields
from pathlib import Path

import yaml


@dataclass
class CodecCfg:
    encoding: str = "utf-8"  # Text encoding used by the file helpers
    compressed_path: str = "compressed_rle.txt"  # Default output of compress_file
    decompressed_path: str = "decompressed_rle.txt"  # Default output of decompress_file
    debug: bool = False  # Control logging verbosity

    @classmethod
    def load(cls, path: str | Path) -> "CodecCfg":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict) -> "CodecCfg":
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)
