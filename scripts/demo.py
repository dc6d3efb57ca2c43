import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from impossible_polygon.config import PASTEL, PRIMARY
from impossible_polygon.generator import generate
from impossible_polygon.io import save_svg


def main() -> None:
    out_dir = ROOT / "exports"
    for n in range(3, 9):
        palette = PRIMARY if n % 3 == 0 else PASTEL
        for debug in (False, True):
            svg = generate(n, debug, 0.0, 0.5, list(palette))
            suffix = "_debug" if debug else ""
            path = save_svg(svg, out_dir / f"polygon_n{n}{suffix}.svg")
            print("Saved", path)


if __name__ == "__main__":
    main()
