"""simulation — The trail rules, free of any rendering dependency.

Everything here operates on one ``GameState`` passed in explicitly, and
takes its randomness from an injected RNG so a seeded run replays
exactly.

Submodules
----------
state        GameState, new_game — the owned aggregate
ledger       Clamped resource / health accounting
events       Random event table and weighted roulette selection
scene_graph  SceneId, Choice — scene texts and choice lists
actions      Action, Status, dispatch — the turn handler
snapshot     Snapshot, take_snapshot — read-only copy for the view
"""
