"""config_loading.py"""
import sys
from pathlib import Path

from cmdspec import SpecArgumentParser, loader

parser = SpecArgumentParser(loader(Path(__file__).parent / "command.yaml"))

if __name__ == "__main__":
    result = parser.parse_args(sys.argv[1:])
    print(result.as_dict())
