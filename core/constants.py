"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.

Unit System
-----------
    Distance        mi      (miles along the trail)
    Food            lb      (pounds)
    Time            day     (one turn-consuming action = one day)
    Health          %       (0 = incapacitated, 100 = fit)
    Counts          —       (oxen, spare wagon parts)

The rules below are fixed; only the *starting* supplies are tunable
(see ``StartConfig`` and ``data/tuning.toml``).

Rendering converts to pixels via ``TILE_SIZE``.
No simulation code should reference pixels — only the renderer.
"""

# ── Health ──────────────────────────────────────────────────────────
MAX_HEALTH = 100

# ── Random events ───────────────────────────────────────────────────
EVENT_CHANCE = 0.35          # per turn-consuming action

# ── Travel ──────────────────────────────────────────────────────────
MILES_PER_OX = 20
MIN_TRAVEL_RATE = 10         # mi/day, even with a single ox
MAX_TRAVEL_RATE = 60         # mi/day
TRAVEL_RATION = 4            # lb per party member per travel day

# ── Hunting ─────────────────────────────────────────────────────────
HUNT_MIN_FOOD = 50           # inclusive
HUNT_MAX_FOOD = 199          # inclusive
HUNT_RATION = 10             # lb eaten on a hunting day
HUNT_INJURY_CHANCE = 0.10
HUNT_INJURY_DAMAGE = 10

# ── Resting ─────────────────────────────────────────────────────────
REST_HEAL = 10
REST_RATION = 2              # lb per party member per rest day

# ── Starvation ──────────────────────────────────────────────────────
STARVE_DAMAGE = 5
STARVE_GRACE_DAYS = 5        # running dry before day 6 is not fatal

# ── Render ──────────────────────────────────────────────────────────
TILE_SIZE = 30
CANVAS_HEIGHT = 300          # height of the wagon scene strip

# (distance threshold, mountain colour), checked in order
SCENERY_COLORS = (
    (1000, (165, 42, 42)),     # red rock country
    (500, (138, 121, 93)),     # dry hills
    (0, (92, 92, 92)),         # grey foothills
)

SKY_COLOR = (122, 155, 154)
GROUND_COLOR = (74, 103, 60)
NIGHT_COLOR = (28, 40, 51)
WHEEL_COLOR = (17, 17, 17)
WAGON_BODY_COLOR = (101, 67, 33)
WAGON_INNER_COLOR = (139, 69, 19)
WAGON_COVER_COLOR = (240, 240, 240)
OX_COLOR = (160, 82, 45)

# Health bar colour thresholds (strictly greater than)
HEALTH_GOOD = 50
HEALTH_FAIR = 20
