from tilecraft.config import TileType, image_type_for
from tilecraft.image import Image


def test_from_type_copies_template():
    template = image_type_for(TileType.DEFAULT)
    image = Image.from_type(3, 4, template)
    assert (image.x, image.y) == (3, 4)
    assert image.width == template.width
    assert image.height == template.height
    assert image.layer == template.layer
    assert image.sprite_x == template.sprite_x
    assert image.sprite_y == template.sprite_y
    assert image.file_name == template.file_name
    assert image.current_frame == template.current_frame
    assert image.total_frames == template.total_frames
    assert image.animated == template.animated
    assert image.flipped == template.flipped
    assert image.is_static == template.is_static


def test_positional_order_matches_fields():
    image = Image(0, 0, 32, 32, 1, False, False, False, 1, 1, 200, 8, "daemon.png")
    assert image.sprite_x == 200
    assert image.sprite_y == 8
    assert image.file_name == "daemon.png"


def test_state_is_mutable():
    image = Image(0, 0, 32, 32, 1, True, False, False, 1, 4, 0, 0, "a.png")
    image.current_frame = 3
    image.animated = False
    assert image.current_frame == 3
    assert image.animated is False


def test_images_from_same_template_are_independent():
    template = image_type_for(TileType.DEFAULT)
    a = Image.from_type(0, 0, template)
    b = Image.from_type(0, 0, template)
    assert a == b
    a.current_frame = 5
    assert b.current_frame == template.current_frame