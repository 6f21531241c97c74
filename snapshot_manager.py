"""Per-run snapshot folders for room detection.

Each detection run gets its own directory with numbered JSON stage dumps,
``run_log.txt``, ``errors.json`` when a stage fails and a closing
``99_run_summary.json`` that lists what was written.
"""

import datetime
import json
import os
import shutil
import traceback

SNAPSHOT_ROOT_ENV = "ROOMDETECT_SNAPSHOT_ROOT"
RUN_PREFIX = "rooms"
LOG_FILE = "run_log.txt"
ERROR_FILE = "errors.json"
SUMMARY_FILE = "99_run_summary.json"


def _ensure_dir(path):
    if not os.path.isdir(path):
        os.makedirs(path)
    return path


def snapshot_root_candidates(preferred=None):
    home = os.path.expanduser("~")
    roots = [
        preferred,
        os.environ.get(SNAPSHOT_ROOT_ENV),
        os.path.join(home, "dev", "roomdetect"),
        os.path.join(home, "roomdetect"),
    ]
    out = []
    for r in roots:
        if r and r not in out:
            out.append(r)
    return out


def open_snapshot_root(preferred=None):
    """First candidate root that exists or can be created; cwd as last resort."""
    for root in snapshot_root_candidates(preferred):
        try:
            return _ensure_dir(root)
        except OSError:
            continue
    return _ensure_dir(os.path.join(os.getcwd(), "roomdetect"))


def _run_id():
    now = datetime.datetime.now()
    return "{}_{}_{}".format(RUN_PREFIX, now.strftime("%Y%m%d_%H%M%S"), now.strftime("%f")[-4:])


class SnapshotRun:
    def __init__(self, root=None, run_name=None):
        self.root = open_snapshot_root(root)
        self.run_name = run_name or _run_id()
        self.run_dir = _ensure_dir(os.path.join(self.root, self.run_name))
        self.written = []
        self.failed_stage = None

    def path(self, name):
        return os.path.join(self.run_dir, name)

    def _track(self, name):
        if name not in self.written:
            self.written.append(name)
        return self.path(name)

    def save_json(self, name, payload):
        path = self._track(name)
        with open(path, "w") as f:
            json.dump(payload, f, indent=2, sort_keys=True)
        return path

    def save_text(self, name, text, append=False):
        path = self._track(name)
        with open(path, "a" if append else "w") as f:
            f.write(text)
            if text and not text.endswith("\n"):
                f.write("\n")
        return path

    def copy_file(self, src_path, target_name):
        if not src_path or not os.path.isfile(src_path):
            return None
        target = self._track(target_name)
        shutil.copy2(src_path, target)
        return target

    def log(self, message):
        stamp = datetime.datetime.now().strftime("%H:%M:%S")
        self.save_text(LOG_FILE, "[{}] {}".format(stamp, message), append=True)

    def save_error(self, stage_name, exc):
        # Call from inside the except block so the traceback is the live one.
        self.failed_stage = stage_name
        self.save_json(ERROR_FILE, {
            "stage": stage_name,
            "error": str(exc),
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        })
        self.save_text(LOG_FILE, "[ERROR] {}: {}".format(stage_name, exc), append=True)

    def write_summary(self, rooms=None):
        rooms = list(rooms or [])
        return self.save_json(SUMMARY_FILE, {
            "run_name": self.run_name,
            "ok": self.failed_stage is None,
            "failed_stage": self.failed_stage,
            "room_count": len(rooms),
            "room_areas": [r.get("area") for r in rooms],
            "files": [n for n in self.written if n != SUMMARY_FILE],
        })
