"""
Materializer Tests - render window construction.
"""
from robodeck.ui.cardview.materializer import materialize, total_height
from robodeck.ui.cardview.models.robot_item import EMPTY_RANGE, VisibleRange
from robodeck.ui.cardview.windowing import compute_range, max_rows


class TestMaterialize:

    def test_scrolled_scenario(self, make_robots):
        robots = make_robots(1000)
        visible = compute_range(2800, 600, 280, 5, len(robots))

        window = materialize(robots, visible, 280)

        assert len(window.rows) == 14
        assert [row.index for row in window.rows] == list(range(5, 19))
        assert window.rows[0].offset == 5 * 280
        assert window.rows[-1].offset == 18 * 280
        assert all(row.item is robots[row.index] for row in window.rows)
        assert window.total_height == 1000 * 280
        assert not window.no_results

    def test_empty_collection_reports_no_results(self):
        for offset, size in [(0, 600), (99_999, 1), (2800, 10_000)]:
            window = materialize((), compute_range(offset, size, 280, 5, 0), 280)

            assert window.rows == ()
            assert window.no_results
            assert window.total_height == 0

    def test_empty_range_is_not_no_results(self, make_robots):
        window = materialize(make_robots(3), EMPTY_RANGE, 280)

        assert window.rows == ()
        assert not window.no_results
        assert window.total_height == 3 * 280

    def test_range_clipped_to_collection(self, make_robots):
        robots = make_robots(5)

        window = materialize(robots, VisibleRange(3, 40), 100)

        assert [row.index for row in window.rows] == [3, 4]

    def test_recomputed_from_current_collection(self, make_robots):
        robots = make_robots(20)
        visible = VisibleRange(0, 4)
        before = materialize(robots, visible, 100)

        reordered = list(reversed(robots))
        after = materialize(reordered, visible, 100)

        assert [row.item.id for row in after.rows] == [r.id for r in reordered[:5]]
        assert [row.offset for row in after.rows] == [row.offset for row in before.rows]

    def test_bounded_rows_for_huge_collection(self, make_robots):
        robots = make_robots(100_000)
        bound = max_rows(600, 280, 5)

        for offset in (0, 1234, 2_800_000, 27_999_000, 28_000_000):
            window = materialize(robots, compute_range(offset, 600, 280, 5, len(robots)), 280)
            assert 0 < len(window.rows) <= bound

    def test_total_height(self):
        assert total_height(0, 280) == 0
        assert total_height(3, 280) == 840
        assert total_height(-1, 280) == 0
