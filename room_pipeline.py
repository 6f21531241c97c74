"""Room detection run: config, wall loading, detection, snapshots."""

from room_config import resolve_room_config
from room_detection import analyze_walls
from room_report import save_room_snapshot_stages
from wall_input import WallInputError, load_walls, walls_from_records


def _log(snapshot, message):
    if snapshot is not None:
        snapshot.log(message)


def _fail(snapshot, stage, ex):
    if snapshot is None:
        return
    snapshot.save_error(stage, ex)
    snapshot.write_summary()


def _load_input_walls(walls, walls_path):
    if walls is not None:
        return walls_from_records(walls)
    if walls_path:
        return load_walls(walls_path)
    raise WallInputError("No walls given: pass walls or walls_path")


def run_room_detection(walls=None, walls_path=None, cfg=None, cfg_path=None, snapshot=None):
    cfg = resolve_room_config(cfg, cfg_path)

    try:
        wall_list = _load_input_walls(walls, walls_path)
    except WallInputError as ex:
        _fail(snapshot, "wall_input", ex)
        raise
    if snapshot is not None and walls is None:
        snapshot.copy_file(walls_path, "walls_source.json")
    _log(snapshot, "Loaded {} walls".format(len(wall_list)))

    try:
        analysis = analyze_walls(wall_list, cfg)
        dbg = analysis["debug"]
        _log(snapshot, "Graph: {} nodes, {} edges".format(dbg["node_count"], dbg["edge_count"]))
        if dbg["aborted_trace_count"]:
            _log(snapshot, "Aborted traces: {}".format(dbg["aborted_trace_count"]))
        _log(snapshot, "Detected {} rooms".format(len(analysis["rooms"])))
        if snapshot is not None:
            save_room_snapshot_stages(snapshot, wall_list, analysis, cfg)
            snapshot.write_summary(analysis["rooms"])
    except Exception as ex:
        _fail(snapshot, "detection", ex)
        raise

    return {
        "rooms": analysis["rooms"],
        "debug": analysis["debug"],
        "snapshot_dir": snapshot.run_dir if snapshot is not None else None,
    }
