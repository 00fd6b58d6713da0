import io

from PIL import Image

from conftest import fill_goals
from manifest_mastery.vision.renderer import BoardPanel, VisionBoardRenderer, panels_from_session


def open_png(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


def test_render_board_size(wizard, png_bytes):
    fill_goals(wizard, ["Get a promotion", "Start a business"])
    wizard.upload_vision_image("Get a promotion", png_bytes)
    wizard.generate_affirmations()

    renderer = VisionBoardRenderer(width=600, height=1000)
    image = open_png(renderer.render(panels_from_session(wizard)))

    assert image.format == "PNG"
    assert image.size == (600, 1000)


def test_render_empty_board():
    image = open_png(VisionBoardRenderer(width=400, height=600).render([]))
    assert image.size == (400, 600)


def test_render_survives_broken_image():
    panels = [BoardPanel(goal="Find a new job", image_data_url="data:image/png;base64,AAAA")]
    image = open_png(VisionBoardRenderer(width=400, height=600).render(panels))
    assert image.size == (400, 600)


def test_panels_pair_goals_with_affirmations(wizard, png_bytes):
    fill_goals(wizard, ["Get a promotion", "Start a business"])
    wizard.upload_vision_image("Start a business", png_bytes)

    panels = panels_from_session(wizard)
    assert [p.goal for p in panels] == ["Get a promotion", "Start a business"]
    assert panels[0].image_data_url is None
    assert panels[0].caption is None

    wizard.generate_affirmations()
    panels = panels_from_session(wizard)
    assert panels[1].caption == "I am confident in my ability to start a business."
    assert panels[1].image_data_url.startswith("data:image/png")


def test_fonts_cover_every_role():
    from manifest_mastery.vision.renderer import FONT_ROLES, load_board_fonts

    fonts = load_board_fonts(540)
    assert set(fonts) == set(FONT_ROLES)
