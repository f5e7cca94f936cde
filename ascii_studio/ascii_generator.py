import logging

from ascii_studio.controller import Controller
from ascii_studio.errors import AsciiStudioError, ValidationFailure
from ascii_studio.models import (
    DEFAULT_FONT,
    DEFAULT_JUSTIFY,
    DEFAULT_TEXT,
    DEFAULT_WIDTH,
    GenerationRequest,
    Phase,
)

logger = logging.getLogger("ascii_generator")


class AsciiGenerator(Controller):
    """
    Explicit generation: the user picks text, font, width and justification.

    Concurrent generate() calls are independent; the response that settles
    last is the one kept.
    """

    def __init__(self, client, text=DEFAULT_TEXT, font=DEFAULT_FONT,
                 width=DEFAULT_WIDTH, justify=DEFAULT_JUSTIFY):
        super().__init__(client)
        self.text = text
        self.font = font
        self.width = width
        self.justify = justify
        self.phase = Phase.IDLE
        self.last_result = None
        self.last_error = None
        self.fonts = ()
        self.copied = False

    async def load_fonts(self):
        """Fetch the catalog once; fall back to the default font on failure."""
        try:
            catalog = await self.client.list_fonts()
            self.fonts = catalog.fonts
        except AsciiStudioError as e:
            logger.error(f"Error fetching fonts: {e}")
            self.fonts = (DEFAULT_FONT,)
            self.notify_error("Failed to load fonts. Please try again.")
        return self.fonts

    async def generate(self):
        if not self.text.strip():
            self.last_error = ValidationFailure("text is empty")
            self.notify_error("Please enter some text to generate ASCII art.")
            return None

        generation_request = GenerationRequest(
            text=self.text,
            font=self.font,
            width=self.width,
            justify=self.justify,
        )
        self.phase = Phase.PENDING
        try:
            result = await self.client.generate(generation_request)
            self.last_result = result
            self.last_error = None
            logger.info(f"Generated ASCII art with font '{result.font_used}'")
            return result
        except AsciiStudioError as e:
            logger.error(f"Error generating ASCII art: {e}")
            self.last_error = e
            self.notify_error("Failed to generate ASCII art. Please try again.")
            return None
        finally:
            self.phase = Phase.SETTLED

    def copy_result(self):
        """Return the art for a clipboard, or None when nothing was generated."""
        if self.last_result is None:
            return None
        self.copied = True
        self.notify("Copied!", "ASCII art copied to clipboard")
        return self.last_result.ascii_art
