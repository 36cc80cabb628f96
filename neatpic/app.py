"""Application - main loop orchestrator.

The Application class coordinates one frame at a time:
- Input handling (via input_handler) -> commands
- Command execution against the AppState context
- View update (fit zoom, wheel zoom, layout)
- Rendering and UI panels (via Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import sys
import traceback

from .state import AppState
from .renderer import Renderer
from .input_handler import poll_frame_input, key_commands, pan_commands, wheel_commands
from .commands import Command, CloseApp
from .frame import update_view
from .image_utils import scan_directory
from .codec import decode_rgba
from .texture_cache import TextureCache
from .settings import SettingsStore
from .errors import DirectoryUnreadable
from .rl_compat import rl, RL_VERSION, c_text, mouse_position, upload_raster, unload_texture
from .config import TARGET_FPS, KEY_CLOSE, MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT
from .logging import log, increment_frame, get_frame


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application()
        app.initialize(opened_path)
        app.run()
    """

    store: SettingsStore = field(default_factory=SettingsStore)
    renderer: Renderer = field(default_factory=Renderer)
    state: Optional[AppState] = None
    running: bool = False
    window_open: bool = False

    def initialize(self, opened_path: str) -> None:
        """Scan the browse root, load settings and open the window.

        Raises:
            DirectoryUnreadable: if the browse root cannot be listed. No
                window is opened in that case.
        """
        ctx = scan_directory(opened_path)
        log(f"[DIR] Found {len(ctx.entries)} images in {ctx.dirpath or '.'} start={ctx.index}")

        settings = self.store.load()
        textures = TextureCache(decode=decode_rgba, upload=upload_raster, unload=unload_texture)
        self.state = AppState.from_open_context(ctx, settings, textures)

        w, h = settings.window_width, settings.window_height
        log(f"[INIT] RL_VER={RL_VERSION} creating window: {w}x{h} title={self.state.window.title!r}")
        rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE)
        rl.InitWindow(w, h, c_text(self.state.window.title))
        self.window_open = True
        rl.SetWindowMinSize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)
        rl.SetExitKey(KEY_CLOSE)
        rl.SetTargetFPS(TARGET_FPS)
        self.renderer.setup_style()

        self.state.input.mouse_pos = mouse_position()
        log("[INIT] Window initialized")

    def run(self) -> None:
        """Run the main loop until a close request, then persist settings."""
        if self.state is None:
            raise RuntimeError("initialize() must be called before run()")
        self.running = True
        log("[APP] Starting main loop")

        try:
            while self.running:
                self._frame()
            # Only a clean quit persists the window size
            self.store.save(self.state.settings)
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
            raise
        finally:
            self._cleanup()

    def _frame(self) -> None:
        """Execute a single frame."""
        state = self.state
        state.track_window_size(rl.GetScreenWidth(), rl.GetScreenHeight())

        # 1. Poll input and execute key/drag commands
        frame = poll_frame_input()
        for cmd in key_commands(state, frame) + pan_commands(state, frame):
            self._execute_command(cmd)
            if not self.running:
                return

        # 2. Update view and draw
        self.renderer.begin_frame()
        self.renderer.draw_background()
        layout = update_view(state, wheel_commands(frame))
        self.renderer.draw_image(layout)

        # 3. Panels report widget interaction as commands
        for cmd in self.renderer.draw_panels(state, layout):
            self._execute_command(cmd)
        self.renderer.end_frame()

        increment_frame()

    def _execute_command(self, cmd: Command) -> None:
        if isinstance(cmd, CloseApp):
            cmd.execute(self.state)
            self.running = False
            return
        cmd.execute(self.state)

    def _cleanup(self) -> None:
        log("[CLEANUP] Starting cleanup")
        if self.state is not None and self.state.textures is not None:
            n = self.state.textures.release_all(self.state.images.entries)
            log(f"[CLEANUP] Unloaded {n} textures")
        if self.window_open:
            log("[CLEANUP] Closing window")
            rl.CloseWindow()
            self.window_open = False
        log(f"[CLEANUP] Cleanup complete frames={get_frame()}")


def opened_path_from_argv(argv: Sequence[str]) -> str:
    """The single optional positional argument, or '' when absent."""
    return argv[1] if len(argv) > 1 else ""


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv if argv is None else argv
    opened_path = opened_path_from_argv(argv)
    log(f"[MAIN] Starting application path={opened_path!r}")

    app = Application()
    try:
        app.initialize(opened_path)
    except DirectoryUnreadable as e:
        log(f"[FATAL] {e}")
        return 1
    app.run()
    return 0
