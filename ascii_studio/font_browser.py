import logging

from ascii_studio.controller import Controller
from ascii_studio.errors import AsciiStudioError
from ascii_studio.models import DEFAULT_PREVIEW_TEXT, GenerationRequest, Phase

logger = logging.getLogger("font_browser")

# Previews ignore the user's layout settings
PREVIEW_WIDTH = 80
PREVIEW_JUSTIFY = "center"


def filter_fonts(fonts, search_term):
    """Names from ``fonts`` containing ``search_term``, case-insensitively, in catalog order."""
    needle = search_term.lower()
    return tuple(name for name in fonts if needle in name.lower())


class FontBrowser(Controller):
    """
    Catalog browsing with a live preview of the selected font.

    Only the most recent preview is shown. Each preview request carries a
    tag; a response whose tag is no longer current is dropped, so selecting
    A then B can never end with A's art on screen.
    """

    def __init__(self, client, preview_text=DEFAULT_PREVIEW_TEXT):
        super().__init__(client)
        self.fonts = ()
        self.search_term = ""
        self.preview_text = preview_text
        self.selected_font = None
        self.preview_result = None
        self.preview_error = None
        self.catalog_phase = Phase.IDLE
        self.preview_phase = Phase.IDLE
        self._preview_tag = 0

    @property
    def filtered_fonts(self):
        return filter_fonts(self.fonts, self.search_term)

    def status_line(self):
        if self.catalog_phase is Phase.PENDING:
            return "Loading fonts..."
        return f"{len(self.filtered_fonts)} fonts available"

    async def load_fonts(self):
        self.catalog_phase = Phase.PENDING
        try:
            catalog = await self.client.list_fonts()
            self.fonts = catalog.fonts
            logger.info(f"Loaded {catalog.count} fonts")
        except AsciiStudioError as e:
            logger.error(f"Error fetching fonts: {e}")
            self.notify_error("Failed to load fonts. Please try again.")
        finally:
            self.catalog_phase = Phase.SETTLED
        return self.fonts

    async def preview_font(self, name):
        self._preview_tag += 1
        tag = self._preview_tag
        self.selected_font = name
        self.preview_phase = Phase.PENDING

        generation_request = GenerationRequest(
            text=self.preview_text,
            font=name,
            width=PREVIEW_WIDTH,
            justify=PREVIEW_JUSTIFY,
        )
        try:
            result = await self.client.generate(generation_request)
            if tag != self._preview_tag:
                logger.debug(f"Dropping stale preview for '{name}'")
                return None
            self.preview_result = result.ascii_art
            self.preview_error = None
            return result.ascii_art
        except AsciiStudioError as e:
            if tag != self._preview_tag:
                logger.debug(f"Dropping stale preview failure for '{name}'")
                return None
            logger.error(f"Error generating preview: {e}")
            self.preview_error = e
            self.preview_result = None
            self.notify_error("Failed to generate font preview. Please try again.")
            return None
        finally:
            # Only the current request may settle; a stale one never touches the phase
            if tag == self._preview_tag:
                self.preview_phase = Phase.SETTLED
