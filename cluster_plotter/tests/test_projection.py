"""
Tests for the property projection used by the scatter plot.
"""

import unittest

from cluster_plotter.src.data.entity import ClusterEntity
from cluster_plotter.src.visualization.projection import project, reference_point


class TestProjection(unittest.TestCase):
    """Test cases for project()"""

    def setUp(self):
        """Set up five entities, two with all three properties numeric"""
        self.entities = [
            ClusterEntity("A", properties={"Age": "12.0", "[Fe/H]": "-1.5", "Rsun": "4.5"}),
            ClusterEntity("B", properties={"Age": "", "[Fe/H]": "-1.0", "Rsun": "2.2"}),
            ClusterEntity("C", properties={"Age": "13.0", "[Fe/H]": "-2.1", "Rsun": "10.4"}),
            ClusterEntity("D", properties={"Age": "11.0", "[Fe/H]": "n/a", "Rsun": "8.1"}),
            ClusterEntity("E", properties={"[Fe/H]": "-0.7", "Rsun": "3.0"}),
        ]

    def test_only_complete_entities_contribute(self):
        """Test 5 entities with 2 complete give a projection of length 2"""
        projection = project(self.entities, "Age", "[Fe/H]", "Rsun")

        self.assertEqual(projection.size, 2)
        self.assertEqual(projection.xs, [12.0, 13.0])
        self.assertEqual(projection.ys, [-1.5, -2.1])
        self.assertEqual(projection.colors, [4.5, 10.4])
        self.assertEqual(projection.labels, ["A", "C"])
        self.assertEqual(projection.skipped, 3)

    def test_series_are_aligned(self):
        """Test the output series always have equal lengths"""
        projection = project(self.entities, "Rsun", "[Fe/H]", "Age")
        self.assertEqual(len(projection.xs), len(projection.ys))
        self.assertEqual(len(projection.xs), len(projection.colors))
        self.assertEqual(len(projection.xs), len(projection.labels))

    def test_color_range_is_observed_range(self):
        """Test the color range comes from the projected values"""
        projection = project(self.entities, "Rsun", "Rsun", "[Fe/H]")
        self.assertEqual(projection.color_range, (-2.1, -0.7))

    def test_property_names_kept(self):
        """Test the selected names are carried for axis titles"""
        projection = project(self.entities, "Age", "[Fe/H]", "Rsun")
        self.assertEqual(
            (projection.x_property, projection.y_property, projection.color_property),
            ("Age", "[Fe/H]", "Rsun"),
        )

    def test_unset_property_is_no_op(self):
        """Test an unset property name returns None"""
        self.assertIsNone(project(self.entities, None, "[Fe/H]", "Rsun"))
        self.assertIsNone(project(self.entities, "Age", None, "Rsun"))
        self.assertIsNone(project(self.entities, "Age", "[Fe/H]", None))

    def test_empty_projection(self):
        """Test a property nobody has gives an empty projection"""
        projection = project(self.entities, "Missing", "Age", "Rsun")
        self.assertTrue(projection.is_empty)
        self.assertIsNone(projection.color_range)
        self.assertEqual(projection.skipped, 5)

    def test_reference_point(self):
        """Test the reference marker position"""
        galaxy = ClusterEntity("MilkyWay", properties={"Age1": "13.61", "[Fe/H]": "0.02"})
        self.assertEqual(reference_point(galaxy, "Age1", "[Fe/H]"), (13.61, 0.02))
        self.assertIsNone(reference_point(galaxy, "Age", "[Fe/H]"))


if __name__ == '__main__':
    unittest.main()
