"""Sample patterns shared by the test modules."""

from typing import Any, Dict, List


def make_patterns_array() -> List[Dict[str, Any]]:
    """Three patterns as a client would submit them."""
    return [
        {
            "user_id": 1,
            "name": "Four On The Floor",
            "kick_steps": [1, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0],
            "snare_steps": [0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0],
            "hh1_steps": [1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0],
            "hh2_steps": [0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1, 0],
            "clap_steps": [0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0],
            "perc_steps": [0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0],
        },
        {
            "user_id": 2,
            "name": "Broken Beat",
            "kick_steps": [1, 0, 0, 1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0],
            "snare_steps": [0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1],
            "hh1_steps": [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
            "hh2_steps": [0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1],
            "clap_steps": [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0],
            "perc_steps": [0, 1, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0],
        },
        {
            "user_id": 2,
            "name": "Empty",
            "kick_steps": [0] * 16,
            "snare_steps": [0] * 16,
            "hh1_steps": [0] * 16,
            "hh2_steps": [0] * 16,
            "clap_steps": [0] * 16,
            "perc_steps": [0] * 16,
        },
    ]
