"""
Air Pointer Tracker.

Combines:
- MediaPipe hand landmark detection
- Gesture engine (smoothed cursor, Pinch, Fist)
- UDP backend service and optional desktop cursor control
"""

import logging
import sys

import cv2

from airpointer.backend_service import GestureBackendService
from airpointer.hand_gestures import (
    EngineConfig,
    GestureEngine,
    GestureState,
    SessionMetrics,
    ViewMode,
    Viewport,
    load_engine_config,
    needs_process_flip,
    tracking_status,
)
from airpointer.hand_gestures.config import FORCE_MIRROR_INPUT, VIEW_MODE
from airpointer.hand_tracks import HandTracker, TrackerDisplay

logger = logging.getLogger("cursor_tracker")

QUIT_KEYS = (ord("q"), 27)
TOGGLE_TRACKING_KEY = ord("t")

# Consecutive failed reads before the camera is considered gone
MAX_READ_FAILURES = 30


INSTRUCTIONS = """
==================================================
Air Pointer Tracker
==================================================

Gestures:
  Index fingertip  - Move cursor
  Pinch            - Press / drag
  Fist             - Pause interaction

Controls:
  't'        - Toggle hand tracking on/off
  'q' or ESC - Quit
"""


def _build_overlay(state: GestureState | None, metrics: SessionMetrics, tracking: bool = True) -> list[str]:
    """Status lines for the preview window."""
    if state is None:
        return ["Waiting for first frame"]

    snap = metrics.snapshot()
    overlay = [f"Status: {tracking_status(state, tracking)}"]
    if not tracking:
        overlay.append("Tracking off ('t' to resume)")
    elif state.hand_detected:
        gesture = "Fist" if state.is_fist else "Pinch" if state.is_pinching else "Pointer"
        overlay.append(f"Gesture: {gesture}")
    else:
        overlay.append("No hand detected")
    overlay.append(f"Cursor: ({state.cursor_x:.0f}, {state.cursor_y:.0f})")
    overlay.append(
        f"Pinches: {snap.pinch_count}  Fists: {snap.fist_count}  "
        f"Presence: {snap.hand_presence:.0f}%"
    )
    return overlay


def track_frames(
    cap,
    tracker: HandTracker,
    display: TrackerDisplay,
    engine: GestureEngine,
    metrics: SessionMetrics,
    viewport: Viewport,
    process_flip: bool = False,
    max_read_failures: int = MAX_READ_FAILURES,
) -> int:
    """
    Run the capture loop until the user quits or the camera stops.

    A frame whose capture timestamp repeats the previous one is skipped
    before detection. While tracking is off the detector is not run and the
    engine sees no hand, so gestures clear and the cursor holds.

    Returns:
        0 on user quit, 1 if the camera stopped delivering frames
    """
    tracking = True
    failures = 0
    last_frame_time = None
    state = None

    while True:
        ok, frame = cap.read()
        if not ok:
            failures += 1
            if failures >= max_read_failures:
                logger.error("Camera stopped delivering frames (%d failed reads)", failures)
                return 1
            if display.poll_key() in QUIT_KEYS:
                return 0
            continue
        failures = 0

        # Capture position in ms; repeats when the device delivered no new frame
        frame_time = cap.get(cv2.CAP_PROP_POS_MSEC) or None
        if frame_time is not None and frame_time == last_frame_time:
            key = display.poll_key()
        else:
            last_frame_time = frame_time

            if process_flip:
                frame = cv2.flip(frame, 1)

            landmarks = tracker.get_landmarks(frame) if tracking else None
            state = engine.process_frame(landmarks, viewport, frame_time=frame_time)
            if tracking:
                metrics.observe(state)
                tracker.draw_landmarks(frame)

            # Cursor x is mirrored, so the preview is the processed frame flipped
            display_frame = cv2.flip(frame, 1)
            display.render(display_frame, state, viewport, _build_overlay(state, metrics, tracking))
            key = display.show(display_frame)

        if key in QUIT_KEYS:
            return 0
        if key == TOGGLE_TRACKING_KEY:
            tracking = not tracking
            logger.info("Tracking %s", "ON" if tracking else "OFF")


def run_cursor_tracker(
    camera_index: int = 0,
    viewport: Viewport = Viewport(1280, 720),
    config: EngineConfig | None = None,
    enable_udp: bool = True,
    udp_ip: str = "127.0.0.1",
    udp_gesture_port: int = 9090,
    broadcast: bool = False,
    desktop_cursor: bool = False,
    view_mode: ViewMode = VIEW_MODE,
    force_mirror: bool = FORCE_MIRROR_INPUT,
) -> int:
    """
    Run the webcam loop until the user quits.

    Args:
        camera_index: Camera device index
        viewport: Pixel space the cursor is reported in
        config: Engine settings
        enable_udp: Whether to enable UDP backend service
        udp_ip: Target IP for UDP commands
        udp_gesture_port: Port for gesture JSON protocol
        broadcast: Whether to use UDP broadcast mode
        desktop_cursor: Whether to drive the OS pointer
        view_mode: Camera placement relative to the hands
        force_mirror: Invert the flip implied by view_mode

    Returns:
        Process exit code
    """
    print(INSTRUCTIONS)
    if enable_udp:
        print(f"UDP Backend: Enabled (target={udp_ip}:{udp_gesture_port})")
    else:
        print("UDP Backend: Disabled")

    cap = cv2.VideoCapture(camera_index)
    if not cap.isOpened():
        logger.error("Cannot open camera %d", camera_index)
        return 1

    cap.set(cv2.CAP_PROP_FRAME_WIDTH, viewport.width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, viewport.height)

    metrics = SessionMetrics()
    consumers = []

    with GestureBackendService(
        viewport,
        gesture_port=udp_gesture_port,
        target_ip=udp_ip,
        broadcast=broadcast,
        enabled=enable_udp,
    ) as backend, HandTracker() as tracker, TrackerDisplay() as display:

        consumers.append(backend)
        cursor = None
        if desktop_cursor:
            from airpointer.desktop_cursor import DesktopCursor
            cursor = DesktopCursor(viewport)
            consumers.append(cursor)

        def publish(state: GestureState) -> None:
            for consumer in consumers:
                consumer(state)

        engine = GestureEngine(consumer=publish, config=config)

        try:
            exit_code = track_frames(
                cap, tracker, display, engine, metrics, viewport,
                process_flip=needs_process_flip(view_mode, force_mirror),
            )
        finally:
            if cursor is not None:
                cursor.close()
            cap.release()
            cv2.destroyAllWindows()

    snap = metrics.snapshot()
    logger.info(
        "Session: %.0fs, %d pinches, %d fists, hand present %.0f%% of frames",
        snap.elapsed_seconds, snap.pinch_count, snap.fist_count, snap.hand_presence,
    )
    return exit_code


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Air Pointer Tracker")
    parser.add_argument("-c", "--camera", type=int, default=0, help="Camera index")
    parser.add_argument("--width", type=int, default=1280, help="Viewport width in pixels")
    parser.add_argument("--height", type=int, default=720, help="Viewport height in pixels")
    parser.add_argument("--prefs", type=str, default=None, help="JSON preferences file")
    parser.add_argument("--pinch-sensitivity", type=float, default=None, help="0.6 - 1.7")
    parser.add_argument("--responsiveness", type=float, default=None, help="0.6 - 1.7")
    parser.add_argument("--view-mode", type=str, default=VIEW_MODE.value,
                        choices=[m.value for m in ViewMode], help="Camera placement")
    parser.add_argument("--mirror", action="store_true", help="Force-mirror the input frames")
    parser.add_argument("--no-udp", action="store_true", help="Disable UDP backend")
    parser.add_argument("--udp-ip", type=str, default="127.0.0.1", help="UDP target IP")
    parser.add_argument("--udp-port", type=int, default=9090, help="UDP gesture port")
    parser.add_argument("--broadcast", action="store_true", help="Use UDP broadcast mode")
    parser.add_argument("--desktop", action="store_true", help="Drive the desktop cursor")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    engine_config = load_engine_config(args.prefs) if args.prefs else EngineConfig()
    if args.pinch_sensitivity is not None or args.responsiveness is not None:
        engine_config = EngineConfig(
            pinch_sensitivity=(args.pinch_sensitivity if args.pinch_sensitivity is not None
                               else engine_config.pinch_sensitivity),
            cursor_responsiveness=(args.responsiveness if args.responsiveness is not None
                                   else engine_config.cursor_responsiveness),
        )

    sys.exit(run_cursor_tracker(
        camera_index=args.camera,
        viewport=Viewport(args.width, args.height),
        config=engine_config,
        enable_udp=not args.no_udp,
        udp_ip=args.udp_ip,
        udp_gesture_port=args.udp_port,
        broadcast=args.broadcast,
        desktop_cursor=args.desktop,
        view_mode=ViewMode(args.view_mode),
        force_mirror=args.mirror or FORCE_MIRROR_INPUT,
    ))
