# Global knobs (registry behaviour + demo window)

# ---------------------------------------------------------------------
# Registry defaults
# ---------------------------------------------------------------------

# What fire() does when an observer raises:
#   "raise"   -> propagate immediately, later observers are skipped
#   "isolate" -> log the failure and keep dispatching
#   "collect" -> run everyone, then raise ObserverErrors with all failures
DEFAULT_ERROR_POLICY = "raise"

# Reject "" as an event name (register / unregister / fire)
REJECT_EMPTY_EVENT_NAMES = True

# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# ---------------------------------------------------------------------
# EventRecorder
# ---------------------------------------------------------------------
HISTORY_LEN = 200           # (event, payload) pairs kept per recorder

# ---------------------------------------------------------------------
# Demo window (run.py / viz)
# ---------------------------------------------------------------------
SCREEN_W, SCREEN_H = 1000, 640
FPS = 30
HUD_LINES = 22              # recent fires shown in the side panel

# Colors
BG_COLOR = (12, 12, 18)
