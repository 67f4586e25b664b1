"""Simple entrypoint to try the outfit engine locally."""

import argparse
import json

from engine_app.app import StylingEngineApp
from models.garment import Garment

DEMO_WARDROBE = [
    Garment(item_id="top-1", title="White shirt", color="white", slot="Top", style="Minimalist"),
    Garment(item_id="bottom-1", title="Navy trousers", color="navy", slot="Bottom", style="Old Money"),
    Garment(item_id="shoes-1", title="White sneakers", color="white", slot="Sneakers"),
    Garment(item_id="dress-1", title="Red slip dress", color="red", slot="Dress", style="Coquette"),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Suggest outfits from a demo wardrobe.")
    parser.add_argument("occasion", nargs="?", default="office")
    parser.add_argument("--count", type=int, default=2)
    args = parser.parse_args()

    app = StylingEngineApp()
    print(json.dumps(app.suggest_outfits(args.occasion, count=args.count, wardrobe=DEMO_WARDROBE), indent=2))


if __name__ == "__main__":
    main()
