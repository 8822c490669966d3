"""Language detector that recognises toy-language projects."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union


@dataclass(frozen=True)
class DetectResult:
    """Outcome of a detection: whether it passed and which language it found."""

    success: bool
    language: Optional[str] = None
    extension: Optional[str] = None

    @classmethod
    def passed(cls, language: str, extension: str) -> DetectResult:
        return cls(True, language, extension)

    def to_json(self) -> str:
        """Serialise as compact JSON with the keys pass, language, extension."""
        data: dict[str, object] = {"pass": self.success}
        if self.language is not None:
            data["language"] = self.language
        if self.extension is not None:
            data["extension"] = self.extension
        return json.dumps(data, separators=(",", ":"))


class Detector:
    """Detects the Toy language."""

    def detect(self, path: Union[str, PathLike]) -> DetectResult:
        return DetectResult.passed("Toy", "toy")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the detector on ``--path`` and print the result as JSON."""
    parser = argparse.ArgumentParser(prog="toyfront-detect", description="Detect the Toy language.")
    parser.add_argument("--path", type=Path, required=True, help="Path to inspect")
    args = parser.parse_args(argv)
    print(Detector().detect(args.path).to_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())