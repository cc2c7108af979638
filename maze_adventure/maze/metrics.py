from typing import Dict


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'path_length': 0,
        'walls_placed': 0,
        'monsters_placed': 0,
        'weapons_placed': 0,
        'potions_placed': 0,
        'placement_attempts': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
