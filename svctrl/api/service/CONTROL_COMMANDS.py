"""Supervisor control characters and state-file names."""

# Command name -> character written to supervise/control
CONTROL_COMMANDS: dict[str, str] = {
    "up": "u",
    "down": "d",
    "once": "o",
    "stop": "p",
    "pause": "p",
    "cont": "c",
    "hup": "h",
    "alarm": "a",
    "int": "i",
    "quit": "q",
    "usr1": "1",
    "usr2": "2",
    "term": "t",
    "kill": "k",
    "exit": "e",
}

CONTROL_FILE = "supervise/control"
PID_FILE = "supervise/pid"
STAT_FILE = "supervise/stat"
LOG_DIR = "log"

# Exact content of supervise/stat once the supervisor has brought the service down
DOWN_STATE = "down\n"
