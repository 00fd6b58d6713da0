"""Vision board wallpaper renderer."""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont, ImageOps

from ..errors import InvalidFileError
from .images import load_data_url

logger = logging.getLogger(__name__)

BACKGROUND = "white"
ACCENT = (147, 51, 234)  # purple-600
ACCENT_END = (236, 72, 153)  # pink-500
TEXT = (55, 65, 81)
PLACEHOLDER_FILL = (243, 232, 255)

FONT_CANDIDATES = {
    "regular": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/System/Library/Fonts/Helvetica.ttc",  # macOS
    ],
    "bold": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
    ],
}

# role -> (face, size at a 1080px wide board)
FONT_ROLES = {
    "header": ("bold", 56),
    "title": ("bold", 36),
    "normal": ("regular", 26),
    "small": ("regular", 22),
}


def load_board_fonts(board_width: int) -> dict:
    """
    Pick a font for every text role, sized relative to the board width.

    Falls back to Pillow's built-in font for any role whose face is missing.
    """
    scale = board_width / 1080
    faces = {
        face: next((path for path in paths if Path(path).exists()), None)
        for face, paths in FONT_CANDIDATES.items()
    }

    fonts = {}
    for role, (face, size) in FONT_ROLES.items():
        path = faces[face]
        if path is not None:
            try:
                fonts[role] = ImageFont.truetype(path, max(int(size * scale), 8))
                continue
            except OSError as e:
                logger.warning(f"Could not load {path} for {role}: {e}")
        fonts[role] = ImageFont.load_default()

    logger.debug(f"Board fonts: {faces}")
    return fonts


@dataclass
class BoardPanel:
    """One goal on the vision board."""
    goal: str
    image_data_url: Optional[str] = None
    caption: Optional[str] = None


class VisionBoardRenderer:
    """Renders the vision board as a PNG wallpaper."""

    def __init__(self, width: int = 1080, height: int = 1920, title: str = "Vision Board 2024"):
        """
        Initialize renderer.

        Args:
            width: Image width
            height: Image height
            title: Heading drawn at the top of the board
        """
        self.width = width
        self.height = height
        self.title = title

        self.fonts = load_board_fonts(width)

    def render(self, panels: list[BoardPanel]) -> bytes:
        """
        Render the board.

        Args:
            panels: One panel per selected goal, in selection order

        Returns:
            PNG image bytes
        """
        logger.info(f"Rendering vision board with {len(panels)} panels")

        image = Image.new("RGB", (self.width, self.height), BACKGROUND)
        draw = ImageDraw.Draw(image)

        self._draw_border(draw)
        body_top = self._draw_header(draw)
        self._draw_panels(image, draw, panels, body_top)

        buffer = io.BytesIO()
        image.save(buffer, "PNG")
        return buffer.getvalue()

    def _draw_border(self, draw: ImageDraw.ImageDraw, thickness: int = 20):
        """Draw a pink-to-purple gradient frame."""
        for x in range(self.width):
            color = self._blend(ACCENT_END, ACCENT, x / max(self.width - 1, 1))
            draw.line([x, 0, x, thickness - 1], fill=color)
            draw.line([x, self.height - thickness, x, self.height - 1], fill=color)
        draw.rectangle([0, 0, thickness - 1, self.height - 1], fill=ACCENT_END)
        draw.rectangle([self.width - thickness, 0, self.width - 1, self.height - 1], fill=ACCENT)

    def _draw_header(self, draw: ImageDraw.ImageDraw) -> int:
        """Draw the centered title. Returns the y where panels start."""
        bbox = draw.textbbox((0, 0), self.title, font=self.fonts["header"])
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        y = 60
        draw.text(((self.width - text_width) // 2, y), self.title, fill=ACCENT, font=self.fonts["header"])

        divider_y = y + text_height + 30
        draw.line([60, divider_y, self.width - 60, divider_y], fill=ACCENT, width=3)
        return divider_y + 30

    def _draw_panels(self, image: Image.Image, draw: ImageDraw.ImageDraw, panels: list[BoardPanel], top: int):
        """Stack panels vertically in the space under the header."""
        if not panels:
            self._draw_centered(draw, "No goals selected yet.", top + 40, self.fonts["title"])
            return

        margin = 60
        gap = 40
        panel_height = (self.height - top - margin - gap * (len(panels) - 1)) // len(panels)

        y = top
        for panel in panels:
            self._draw_panel(image, draw, panel, margin, y, self.width - 2 * margin, panel_height)
            y += panel_height + gap

    def _draw_panel(
        self,
        image: Image.Image,
        draw: ImageDraw.ImageDraw,
        panel: BoardPanel,
        x: int,
        y: int,
        width: int,
        height: int,
    ):
        """Draw a single goal: name, picture and caption."""
        draw.text((x, y), panel.goal, fill=TEXT, font=self.fonts["title"])

        caption_space = 50 if panel.caption else 0
        image_top = y + 55
        image_height = max(height - 55 - caption_space, 1)

        picture = self._load_picture(panel)
        if picture is not None:
            fitted = ImageOps.fit(picture.convert("RGB"), (width, image_height))
            image.paste(fitted, (x, image_top))
        else:
            draw.rectangle(
                [x, image_top, x + width, image_top + image_height],
                fill=PLACEHOLDER_FILL,
                outline=ACCENT,
                width=2,
            )
            self._draw_centered(
                draw,
                "No image uploaded yet.",
                image_top + image_height // 2 - 13,
                self.fonts["normal"],
            )

        if panel.caption:
            draw.text(
                (x, image_top + image_height + 12),
                panel.caption,
                fill=TEXT,
                font=self.fonts["small"],
            )

    def _load_picture(self, panel: BoardPanel) -> Optional[Image.Image]:
        if not panel.image_data_url:
            return None
        try:
            return load_data_url(panel.image_data_url)
        except InvalidFileError as e:
            logger.warning(f"Skipping image for {panel.goal!r}: {e}")
            return None

    def _draw_centered(self, draw: ImageDraw.ImageDraw, text: str, y: int, font):
        bbox = draw.textbbox((0, 0), text, font=font)
        text_width = bbox[2] - bbox[0]
        draw.text(((self.width - text_width) // 2, y), text, fill=TEXT, font=font)

    @staticmethod
    def _blend(start: tuple, end: tuple, t: float) -> tuple:
        return tuple(int(a + (b - a) * t) for a, b in zip(start, end))


def panels_from_session(state) -> list[BoardPanel]:
    """Build board panels from a wizard session, pairing goals with their affirmations."""
    panels = []
    for index, goal in enumerate(state.selected_goals):
        affirmations = state.derived.affirmations
        panels.append(
            BoardPanel(
                goal=goal,
                image_data_url=state.vision_board.get(goal),
                caption=affirmations[index] if index < len(affirmations) else None,
            )
        )
    return panels


def demo_render():
    """Demo: Render a board for a sample session."""
    from ..wizard.controller import WizardController

    wizard = WizardController()
    for goal in ["Get a promotion", "Start a business"]:
        wizard.select_goal(goal)
    wizard.generate_affirmations()

    sample = io.BytesIO()
    Image.new("RGB", (640, 360), ACCENT).save(sample, "PNG")
    wizard.upload_vision_image("Get a promotion", sample.getvalue())

    renderer = VisionBoardRenderer()
    output = Path("vision-board-demo.png")
    output.write_bytes(renderer.render(panels_from_session(wizard)))

    print("\n" + "=" * 60)
    print("VISION BOARD RENDERED")
    print("=" * 60)
    print(f"\nImage saved to: {output}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demo_render()
