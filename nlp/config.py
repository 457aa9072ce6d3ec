"""
Parser layer configuration.
Transcript log sizing and operator feedback templates.
"""

import os

# === Session transcript log ===
TRANSCRIPT_LOG_SIZE = int(os.environ.get("PATROLLINK_TRANSCRIPT_LOG_SIZE", "200"))

# === Feedback templates — spoken/displayed back to the operator ===
FEEDBACK_EVENTS = {
    "move": {
        "forward": "Moving forward",
        "backward": "Reversing",
        "left": "Moving left",
        "right": "Moving right",
        "stop": "Stopping",
    },
    "turn": {
        "left": "Turning left",
        "right": "Turning right",
    },
    "rotate": {
        "cw": "Rotating clockwise",
        "ccw": "Rotating counterclockwise",
    },
    "camera": {
        "photo": "Taking a photo",
        "record": "Recording video",
        "zoom": "Zooming",
    },
    "speed": "Speed set",
    "siren": "Siren",
    "lights": "Lights",
    "spray": "Spraying",
    "taser": "Taser",
    "wait": None,
    "safety": "Emergency stop. All motion halted.",
    "command_unclear": "Didn't catch that. Please repeat.",
}
