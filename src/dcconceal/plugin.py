# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : plugin.py
#   file_relpath : src/dcconceal/plugin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plugin lifecycle and reconfiguration for both surfaces.

`ConcealPlugin` owns the settings, the editor extension handed to live views,
the rendered-surface registration counter and the reading view renderer.

Reconfiguration:
    - ``edit_mode`` or ``edit_replacement`` changed: the editor extension is
      rebuilt and every attached view gets a fresh controller (or none when
      ``edit_mode`` is off).
    - ``read_replacement`` changed: a new rewriter generation is registered,
      superseding the previous one, and the reading view is re-rendered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dcconceal.config.logging import get_logger
from dcconceal.config.model import Settings, save_settings
from dcconceal.live.controller import editor_conceal_plugin
from dcconceal.rendered.extension import DoubleColonConcealExtension
from dcconceal.rendered.guard import GenerationCounter
from dcconceal.rendered.renderer import MarkdownRenderer

if TYPE_CHECKING:
    from pathlib import Path

    from dcconceal.config.logging import DcConcealLogger
    from dcconceal.live.controller import LiveOverlayController, ViewPlugin, ViewUpdate
    from dcconceal.live.document import EditorView
    from dcconceal.live.scanner import ConcealRegion

logger: DcConcealLogger = get_logger(__name__)


class ConcealPlugin:
    """Wire settings to the live and rendered surfaces.

    Args:
        settings (Settings | None): Initial settings (defaults when None).
        renderer (MarkdownRenderer | None): Reading view; created from
            ``settings.markdown_extensions`` when None.
        settings_path (Path | None): File the settings are saved to on change.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        renderer: MarkdownRenderer | None = None,
        settings_path: Path | None = None,
    ) -> None:
        self.settings: Settings = settings or Settings()
        self.settings_path: Path | None = settings_path
        self.renderer: MarkdownRenderer = renderer or MarkdownRenderer(
            self.settings.markdown_extensions
        )
        self.editor_extension: list[ViewPlugin] = []
        self.postprocessor_generation: GenerationCounter = GenerationCounter()
        self._views: dict[int, EditorView] = {}
        self._controllers: dict[int, list[LiveOverlayController]] = {}
        self.loaded: bool = False

    # --- lifecycle ---

    def load(self) -> None:
        self.update_editor_extension()
        self.add_markdown_postprocessor()
        self.loaded = True
        self.rerender_active_views()

    def unload(self) -> None:
        self.editor_extension.clear()
        self._refresh_controllers()
        # Invalidate every registered rewriter.
        self.postprocessor_generation.issue()
        self.loaded = False
        self.rerender_active_views()

    # --- live surface ---

    def attach_view(self, view: EditorView) -> None:
        """Attach a host view; it receives controllers from the editor extension."""
        key = id(view)
        self._views[key] = view
        self._controllers[key] = [ext.create(view) for ext in self.editor_extension]

    def detach_view(self, view: EditorView) -> None:
        key = id(view)
        for controller in self._controllers.pop(key, []):
            controller.destroy()
        self._views.pop(key, None)

    def notify(self, view: EditorView, update: ViewUpdate) -> None:
        """Forward a host update for ``view`` to its controllers.

        The update's view replaces the attached one.
        """
        key = id(view)
        if key not in self._views:
            return
        controllers = self._controllers.pop(key)
        del self._views[key]
        new_key = id(update.view)
        self._views[new_key] = update.view
        self._controllers[new_key] = controllers
        for controller in controllers:
            controller.update(update)

    def decorations(self, view: EditorView) -> tuple[ConcealRegion, ...]:
        """Return the concealment regions currently drawn over ``view``."""
        regions: list[ConcealRegion] = []
        for controller in self._controllers.get(id(view), []):
            regions.extend(controller.decorations)
        return tuple(sorted(regions))

    def add_editor_extension(self) -> None:
        self.editor_extension.clear()
        if self.settings.edit_mode:
            self.editor_extension.append(editor_conceal_plugin(self.settings.edit_replacement))

    def update_editor_extension(self) -> None:
        self.add_editor_extension()
        self._refresh_controllers()

    def _refresh_controllers(self) -> None:
        for key, view in self._views.items():
            for controller in self._controllers.get(key, []):
                controller.destroy()
            self._controllers[key] = [ext.create(view) for ext in self.editor_extension]

    # --- rendered surface ---

    def add_markdown_postprocessor(self) -> None:
        self.renderer.register(
            DoubleColonConcealExtension(
                replacement=self.settings.read_replacement,
                counter=self.postprocessor_generation,
            )
        )

    def update_markdown_postprocessor(self) -> None:
        self.add_markdown_postprocessor()
        self.rerender_active_views()

    def rerender_active_views(self) -> str | None:
        return self.renderer.rerender(force=True)

    def render(self, source: str) -> str:
        """Render ``source`` in the reading view."""
        return self.renderer.render(source)

    # --- settings ---

    def update_settings(self, **changes: Any) -> Settings:
        """Apply setting changes and reconfigure the affected surfaces.

        Args:
            **changes (Any): ``edit_mode``, ``read_replacement`` and/or
                ``edit_replacement``; ``None`` glyphs become ``""``.

        Returns:
            Settings: The new settings snapshot.
        """
        draft = self.settings.thaw()
        for key, value in changes.items():
            if not hasattr(draft, key):
                raise TypeError(f"Unknown setting: {key}")
            setattr(draft, key, value)
        previous, self.settings = self.settings, draft.freeze()
        logger.debug("Settings changed: %r", changes)

        if self.settings_path is not None:
            save_settings(self.settings, self.settings_path)

        if not self.loaded:
            return self.settings
        if (
            previous.edit_mode != self.settings.edit_mode
            or previous.edit_replacement != self.settings.edit_replacement
        ):
            self.update_editor_extension()
        if previous.read_replacement != self.settings.read_replacement:
            self.update_markdown_postprocessor()
        return self.settings
