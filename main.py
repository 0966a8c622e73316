"""Simple entrypoint to rank sample outfits locally."""

import argparse
import json

from models.sample_wardrobe import build_sample_wardrobe
from stylist_app.app import OutfitStylistApp


def main() -> None:
    parser = argparse.ArgumentParser(description="Rank outfits from the sample wardrobe.")
    parser.add_argument("occasion", nargs="?", default="casual")
    parser.add_argument("--max-outfits", type=int, default=None)
    args = parser.parse_args()

    app = OutfitStylistApp()
    response = app.generate("demo", build_sample_wardrobe("demo"), args.occasion, args.max_outfits)
    print(json.dumps(response, indent=2))


if __name__ == "__main__":
    main()
