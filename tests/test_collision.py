"""
Tests for the collision predicates.
"""


def _cells(*pairs):
    from termsnake.game import Position
    return tuple(Position(x, y) for x, y in pairs)


class TestBounds:
    """Tests for wall checks."""

    def test_inside_and_edges(self):
        """Test every edge cell of a 20x10 board is valid."""
        from termsnake.game.collision import is_out_of_bounds, is_valid_position
        from termsnake.game import Position

        for cell in (Position(0, 0), Position(19, 0), Position(0, 9), Position(19, 9)):
            assert not is_out_of_bounds(cell, 20, 10)
            assert is_valid_position(cell, 20, 10)

    def test_outside(self):
        """Test one step past any edge is out of bounds."""
        from termsnake.game.collision import is_out_of_bounds
        from termsnake.game import Position

        for cell in (Position(-1, 5), Position(20, 5), Position(5, -1), Position(5, 10)):
            assert is_out_of_bounds(cell, 20, 10)


class TestSelfCollision:
    """Tests for the body check."""

    def test_current_head_excluded(self):
        """Test the cell the head is leaving does not count."""
        from termsnake.game.collision import is_self_collision
        from termsnake.game import Position

        segments = _cells((10, 5), (9, 5), (8, 5))

        assert not is_self_collision(Position(10, 5), segments)

    def test_body_and_tail_included(self):
        """Test every segment after the head counts."""
        from termsnake.game.collision import is_self_collision
        from termsnake.game import Position

        segments = _cells((10, 5), (9, 5), (8, 5))

        assert is_self_collision(Position(9, 5), segments)
        assert is_self_collision(Position(8, 5), segments)
        assert not is_self_collision(Position(11, 5), segments)

    def test_on_snake_includes_head(self):
        """Test the placement predicate covers the head too."""
        from termsnake.game.collision import is_on_snake
        from termsnake.game import Position

        assert is_on_snake(Position(10, 5), _cells((10, 5), (9, 5)))


class TestClassify:
    """Tests for collision classification order."""

    def test_safe_cell(self):
        """Test an empty in-bounds cell is no collision."""
        from termsnake.game.collision import classify_collision
        from termsnake.game import Position

        assert classify_collision(Position(11, 5), 20, 10, set(), _cells((10, 5), (9, 5))) is None

    def test_wall(self):
        """Test leaving the board is a Wall collision."""
        from termsnake.game.collision import classify_collision, CollisionType
        from termsnake.game import Position

        result = classify_collision(Position(20, 5), 20, 10, set(), _cells((19, 5), (18, 5)))

        assert result is CollisionType.WALL
        assert result.value == "Wall"

    def test_obstacle(self):
        """Test obstacle cells are an Obstacle collision."""
        from termsnake.game.collision import classify_collision, CollisionType
        from termsnake.game import Position

        result = classify_collision(Position(11, 5), 20, 10, {Position(11, 5)}, _cells((10, 5),))

        assert result is CollisionType.OBSTACLE

    def test_obstacle_before_self(self):
        """Test Obstacle wins over Self when both apply."""
        from termsnake.game.collision import classify_collision, CollisionType
        from termsnake.game import Position

        segments = _cells((10, 5), (9, 5))
        result = classify_collision(Position(9, 5), 20, 10, {Position(9, 5)}, segments)

        assert result is CollisionType.OBSTACLE

    def test_self(self):
        """Test running into the body is a Self collision."""
        from termsnake.game.collision import classify_collision, CollisionType
        from termsnake.game import Position

        segments = _cells((10, 5), (10, 6), (9, 6), (9, 5))
        result = classify_collision(Position(9, 5), 20, 10, set(), segments)

        assert result is CollisionType.SELF
