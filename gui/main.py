"""Pygame front-end for painting hex terrain maps."""
from __future__ import annotations

import argparse
import logging
import os
import time
from typing import Optional, Tuple

import pygame

from hexgrid import Coord
from editor.config import (
    AUTOSAVE_DELAY_MS, EXPAND_DEFAULT, GRID_TOOLS, TOOLS, WHEEL_PAN_STEP,
    WHEEL_ZOOM_IN, WHEEL_ZOOM_OUT, ZOOM_STEP,
)
from editor.errors import MalformedDocument, MapError
from editor.session import MapSession
from render.canvas import draw_map
from render.pipeline import RenderOptions
from storage.autosave import AutosaveSlot

logger = logging.getLogger(__name__)

AUTOSAVE_EVENT = pygame.USEREVENT + 1

TOOL_KEYS = {
    pygame.K_t: "tile",
    pygame.K_f: "feature",
    pygame.K_r: "road",
    pygame.K_v: "river",
    pygame.K_h: "hand",
}

HUD_FG = (30, 30, 36)
HUD_BG = (255, 255, 255)
NOTICE_BG = (127, 29, 29)
NOTICE_FG = (255, 255, 255)


class MapEditorGUI:
    """Interactive hex-map editor window."""

    def __init__(self, map_path: str = "hexmap.json", export_path: str = "hexmap.png",
                 autosave_dir: Optional[str] = None,
                 size: Tuple[int, int] = (1280, 800)) -> None:
        pygame.init()
        self.clock = pygame.time.Clock()
        self.fps = 60
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption("Hex Map Builder")
        self.font = pygame.font.SysFont("consolas", 16)

        self.session = MapSession()
        self.map_path = map_path
        self.export_path = export_path

        # UI state, passed explicitly to the renderer every frame
        self.tool = "tile"
        self.terrain = self.session.catalog.ids()[0]
        self.erasing = False
        self.show_grid = True
        self.hover: Optional[Coord] = None
        self.dragging = False
        self.notice: Optional[str] = None
        self.running = True

        self.autosave = AutosaveSlot(autosave_dir) if autosave_dir else None
        if self.autosave is not None:
            state = self.autosave.load(self.session.catalog)
            if state is not None:
                self.session.restore(state.tiles, state.extent, state.viewport)
                saved = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(state.last_modified / 1000))
                logger.info("restored autosave with %d tiles, last modified %s", len(state.tiles), saved)
        self._armed_key = self._state_key()

        self._hud_text = ""
        self._hud_surface: Optional[pygame.Surface] = None

    # utils
    @property
    def viewport(self):
        return self.session.viewport

    def canvas_center(self) -> Tuple[float, float]:
        sw, sh = self.screen.get_size()
        return sw / 2.0, sh / 2.0

    def screen_to_hex(self, sx: int, sy: int) -> Coord:
        return self.viewport.screen_to_hex(sx, sy, self.canvas_center(), self.session.hex_size)

    def render_options(self) -> RenderOptions:
        return RenderOptions(show_grid=self.show_grid, hover=self.hover,
                             tool=self.tool, erasing=self.erasing)

    def set_tool(self, tool: str) -> None:
        if tool not in TOOLS:
            raise ValueError(f"unknown tool {tool!r}")
        self.tool = tool
        if tool not in GRID_TOOLS:
            self.hover = None

    def select_terrain(self, index: int) -> None:
        ids = self.session.catalog.ids()
        self.terrain = ids[index % len(ids)]
        self.erasing = False

    # actions
    def apply_at(self, sx: int, sy: int) -> None:
        """Paint or erase the hex under a screen point, depending on the tool."""
        q, r = self.screen_to_hex(sx, sy)
        try:
            if self.tool == "tile" and not self.erasing:
                self.session.paint(q, r, self.terrain)
            elif self.erasing:
                self.session.erase(q, r)
        except MapError as exc:
            logger.debug("edit at (%d,%d) refused: %s", q, r, exc)

    def open_map(self, path: Optional[str] = None) -> bool:
        path = path or self.map_path
        try:
            self.session.load_file(path)
        except MalformedDocument as exc:
            logger.warning("failed to load %s: %s", path, exc)
            self.notice = "Failed to load map file"
            return False
        self.map_path = path
        return True

    def save_map(self) -> None:
        try:
            self.session.save_file(self.map_path)
        except OSError as exc:
            logger.error("failed to save %s: %s", self.map_path, exc)
            self.notice = "Failed to save map file"

    def export_map(self) -> None:
        try:
            self.session.export_png(self.export_path)
        except OSError as exc:
            logger.error("failed to export %s: %s", self.export_path, exc)
            self.notice = "Failed to export image"

    def expand_map(self) -> None:
        n = EXPAND_DEFAULT
        self.session.expand(north=n, south=n, east=n, west=n)

    # autosave
    def _state_key(self):
        return (self.session.revision, self.viewport.as_tuple())

    def schedule_autosave(self) -> None:
        """(Re)arm the one-shot autosave timer whenever state has changed."""
        if self.autosave is None:
            return
        key = self._state_key()
        if key != self._armed_key:
            self._armed_key = key
            pygame.time.set_timer(AUTOSAVE_EVENT, AUTOSAVE_DELAY_MS, 1)

    def write_autosave(self) -> None:
        if self.autosave is None:
            return
        s = self.session
        try:
            self.autosave.write(s.tiles, s.extent, s.viewport)
        except OSError as exc:
            logger.warning("autosave failed: %s", exc)

    # events
    def handle_mouse_down(self, ev: pygame.event.Event) -> None:
        if ev.button != 1:
            return
        space = pygame.key.get_pressed()[pygame.K_SPACE]
        if self.tool == "hand" or space:
            self.dragging = True
        else:
            self.apply_at(*ev.pos)

    def handle_mouse_up(self, ev: pygame.event.Event) -> None:
        if ev.button == 1:
            self.dragging = False

    def handle_motion(self, ev: pygame.event.Event) -> None:
        if self.dragging:
            self.viewport.pan(*ev.rel)
        elif self.tool in GRID_TOOLS:
            self.hover = self.screen_to_hex(*ev.pos)

    def handle_wheel(self, ev: pygame.event.Event) -> None:
        mods = pygame.key.get_mods()
        if mods & (pygame.KMOD_CTRL | pygame.KMOD_META):
            if ev.y:
                self.viewport.zoom_by(WHEEL_ZOOM_IN if ev.y > 0 else WHEEL_ZOOM_OUT)
        else:
            self.viewport.pan(-ev.x * WHEEL_PAN_STEP, ev.y * WHEEL_PAN_STEP)

    def handle_leave(self) -> None:
        self.dragging = False
        self.hover = None

    def handle_key(self, ev: pygame.event.Event) -> None:
        mods = pygame.key.get_mods()
        ctrl = mods & (pygame.KMOD_CTRL | pygame.KMOD_META)
        if ev.key == pygame.K_ESCAPE:
            self.running = False
        elif ctrl and ev.key == pygame.K_s:
            self.save_map()
        elif ctrl and ev.key == pygame.K_o:
            self.open_map()
        elif ctrl and ev.key == pygame.K_e:
            self.export_map()
        elif ctrl and ev.key == pygame.K_n:
            self.session.new_map()
        elif ev.key in TOOL_KEYS:
            self.set_tool(TOOL_KEYS[ev.key])
        elif ev.key == pygame.K_e:
            self.erasing = not self.erasing
        elif ev.key == pygame.K_g:
            self.show_grid = not self.show_grid
        elif ev.key == pygame.K_x:
            self.expand_map()
        elif ev.key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS):
            self.viewport.zoom_delta(ZOOM_STEP)
        elif ev.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.viewport.zoom_delta(-ZOOM_STEP)
        elif ev.key == pygame.K_0:
            self.viewport.reset()
        elif ev.key == pygame.K_LEFTBRACKET:
            self.select_terrain(self.session.catalog.ids().index(self.terrain) - 1)
        elif ev.key == pygame.K_RIGHTBRACKET:
            self.select_terrain(self.session.catalog.ids().index(self.terrain) + 1)
        elif pygame.K_1 <= ev.key <= pygame.K_9:
            index = ev.key - pygame.K_1
            if index < len(self.session.catalog):
                self.select_terrain(index)

    def handle_event(self, ev: pygame.event.Event) -> None:
        if ev.type == pygame.QUIT:
            self.running = False
            return
        if ev.type == AUTOSAVE_EVENT:
            self.write_autosave()
            return
        if self.notice is not None:
            # the load-failure notice swallows input until dismissed
            if ev.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                self.notice = None
            return
        if ev.type == pygame.KEYDOWN:
            self.handle_key(ev)
        elif ev.type == pygame.MOUSEBUTTONDOWN:
            self.handle_mouse_down(ev)
        elif ev.type == pygame.MOUSEBUTTONUP:
            self.handle_mouse_up(ev)
        elif ev.type == pygame.MOUSEMOTION:
            self.handle_motion(ev)
        elif ev.type == pygame.MOUSEWHEEL:
            self.handle_wheel(ev)
        elif ev.type == pygame.WINDOWLEAVE:
            self.handle_leave()

    def run(self) -> None:
        while self.running:
            for ev in pygame.event.get():
                self.handle_event(ev)
            self.schedule_autosave()
            self.draw()
            pygame.display.flip()
            self.clock.tick(self.fps)
        self.write_autosave()
        pygame.quit()

    # drawing
    def hud_string(self) -> str:
        s = self.session
        terrain = s.catalog.get(self.terrain)
        parts = [
            f"tool:{self.tool}",
            "ERASE" if self.erasing else f"terrain:{terrain.name if terrain else self.terrain}",
            f"grid:{'on' if self.show_grid else 'off'}",
            f"zoom:{int(round(self.viewport.scale * 100))}%",
            f"map:{s.extent.width}x{s.extent.height}",
            f"tiles:{len(s.tiles)}",
        ]
        if self.hover is not None:
            parts.append(f"hex({self.hover[0]},{self.hover[1]})")
        return " | ".join(parts)

    def draw(self) -> None:
        scr = self.screen
        s = self.session
        draw_map(scr, s.tiles, s.extent, s.viewport, self.render_options(), hex_size=s.hex_size)

        hud_str = self.hud_string()
        if hud_str != self._hud_text:
            self._hud_text = hud_str
            self._hud_surface = self.font.render(hud_str, True, HUD_FG, HUD_BG)
        if self._hud_surface is not None:
            scr.blit(self._hud_surface, (8, 8))

        if self.notice is not None:
            sw, sh = scr.get_size()
            text = self.font.render(f"{self.notice} (press any key)", True, NOTICE_FG)
            box = text.get_rect(center=(sw // 2, sh // 2)).inflate(32, 24)
            pygame.draw.rect(scr, NOTICE_BG, box)
            scr.blit(text, text.get_rect(center=box.center))


def window_size(text: str) -> Tuple[int, int]:
    """argparse type for ``WxH`` window sizes."""
    parts = text.lower().split("x")
    if len(parts) != 2 or not all(p.isdigit() and int(p) > 0 for p in parts):
        raise argparse.ArgumentTypeError(f"expected WxH, got {text!r}")
    return int(parts[0]), int(parts[1])


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Hex terrain map editor")
    parser.add_argument("map", nargs="?", default=None, help="Map JSON file to open")
    parser.add_argument("--save-as", default="hexmap.json", help="Path used by Ctrl+S")
    parser.add_argument("--export", default="hexmap.png", help="Path used by Ctrl+E")
    parser.add_argument("--autosave-dir", default=os.path.join(os.path.expanduser("~"), ".hexmap"))
    parser.add_argument("--no-autosave", action="store_true")
    parser.add_argument("--window", type=window_size, default="1280x800", help="Window size WxH")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    gui = MapEditorGUI(map_path=args.map or args.save_as, export_path=args.export,
                       autosave_dir=None if args.no_autosave else args.autosave_dir,
                       size=args.window)
    if args.map and os.path.exists(args.map):
        gui.open_map(args.map)
    gui.run()


if __name__ == "__main__":
    main()
