from tilecraft.config import TILE_HEIGHT, TILE_WIDTH, TileType, image_type_for
from tilecraft.world import World


def test_grid_dimensions():
    world = World(TILE_WIDTH * 4, TILE_HEIGHT * 3)
    assert world.columns() == 4
    assert world.rows() == 3
    assert len(world.tiles) == world.rows()
    assert all(len(row) == world.columns() for row in world.tiles)


def test_partial_tiles_are_dropped():
    world = World(TILE_WIDTH * 2 + TILE_WIDTH - 1, TILE_HEIGHT - 1)
    assert world.columns() == 2
    assert world.rows() == 0
    assert world.tile_images() == []


def test_tile_coordinates_are_grid_indices():
    world = World(TILE_WIDTH * 3, TILE_HEIGHT * 2)
    for y, row in enumerate(world.tiles):
        for x, tile in enumerate(row):
            assert (tile.x, tile.y) == (x, y)
            assert (tile.image.x, tile.image.y) == (x, y)
            assert tile.blocking is False and tile.special is False


def test_tile_images_row_major_order():
    world = World(TILE_WIDTH * 3, TILE_HEIGHT * 2)
    images = world.tile_images()
    assert len(images) == world.columns() * world.rows()
    assert [(i.x, i.y) for i in images] == [
        (x, y) for y in range(world.rows()) for x in range(world.columns())
    ]
    assert images[0] is world.tiles[0][0].image


def test_tiles_use_default_template():
    world = World(TILE_WIDTH, TILE_HEIGHT)
    template = image_type_for(TileType.DEFAULT)
    (image,) = world.tile_images()
    assert image.file_name == template.file_name
    assert (image.width, image.height) == (TILE_WIDTH, TILE_HEIGHT)
    assert world.name == "Swamp World"