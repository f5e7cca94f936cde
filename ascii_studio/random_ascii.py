import logging

from ascii_studio.controller import Controller
from ascii_studio.errors import AsciiStudioError
from ascii_studio.models import DEFAULT_JUSTIFY, DEFAULT_WIDTH, GenerationRequest, Phase

logger = logging.getLogger("random_ascii")


class RandomAscii(Controller):
    """
    Random generation behind a single action.

    With custom text the backend picks only the font; without it the
    backend picks text, font and layout. The chosen font is whatever the
    result reports in ``font_used``.
    """

    def __init__(self, client, custom_text=""):
        super().__init__(client)
        self.custom_text = custom_text
        self.phase = Phase.IDLE
        self.last_result = None
        self.last_error = None
        self.copied = False

    def has_custom_text(self):
        return bool(self.custom_text.strip())

    def hint(self):
        if self.has_custom_text():
            return "Click generate to see your text in a random font"
        return "Click generate to get completely random ASCII art"

    async def generate_random(self):
        self.phase = Phase.PENDING
        try:
            if self.has_custom_text():
                # font omitted: the backend chooses
                result = await self.client.generate(GenerationRequest(
                    text=self.custom_text,
                    width=DEFAULT_WIDTH,
                    justify=DEFAULT_JUSTIFY,
                ))
            else:
                result = await self.client.random()
            self.last_result = result
            self.last_error = None
            logger.info(f"Random ASCII art rendered with font '{result.font_used}'")
            return result
        except AsciiStudioError as e:
            logger.error(f"Error generating random ASCII art: {e}")
            self.last_error = e
            self.notify_error("Failed to generate random ASCII art. Please try again.")
            return None
        finally:
            self.phase = Phase.SETTLED

    def copy_result(self):
        if self.last_result is None:
            return None
        self.copied = True
        self.notify("Copied!", "ASCII art copied to clipboard")
        return self.last_result.ascii_art
