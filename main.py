"""
main.py — Bootstrap

1. Load tuning values (data/tuning.toml)
2. Build the starting configuration and a fresh journey
3. Seed the RNG (fixed seed if tuning provides one)
4. Create the app, push the trail scene, run
"""

import random

from core import tuning
from core.app import App
from components import StartConfig
from simulation.state import new_game
from scenes.trail_scene import TrailScene


def main():
    tuning.load()

    config = StartConfig.from_tuning()
    journal_size = int(tuning.get("game", "journal_size", 200))
    seed = tuning.get("game", "seed", None)
    rng = random.Random(seed)
    if seed is not None:
        print(f"[MAIN] Using fixed seed {seed}")

    state = new_game(config, journal_size)
    print(f"[MAIN] {len(state.party)} travellers, {config.food} lbs food, "
          f"{config.oxen} oxen, {config.destination} mi to go")

    app = App(
        title="Wagon Trail",
        width=int(tuning.get("window", "width", 960)),
        height=int(tuning.get("window", "height", 640)),
        fps=int(tuning.get("window", "fps", 30)),
    )
    app.push_scene(TrailScene(state, rng, config=config, journal_size=journal_size))
    app.run()


if __name__ == "__main__":
    main()
