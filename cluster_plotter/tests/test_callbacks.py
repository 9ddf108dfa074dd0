"""
Tests for callback modules.

Tests the callback classes for proper initialization, callback registration,
and interaction handling.
"""

import unittest
from unittest.mock import MagicMock, patch

import dash_bootstrap_components as dbc
import plotly.graph_objs as go
from dash import Patch, no_update

from cluster_plotter.callbacks.main_plot import MainPlotCallbacks
from cluster_plotter.callbacks.scene_callbacks import SceneCallbacks
from cluster_plotter.callbacks.ui_callbacks import UICallbacks
from cluster_plotter.src.animation import OrbitalStateSimulator, RotationAnimator
from cluster_plotter.src.data.loader import create_galaxy_entity, create_sun_entity
from cluster_plotter.src.visualization.figures import FigureManager
from cluster_plotter.src.visualization.scene import SceneRenderer
from cluster_plotter.src.visualization.traces import TraceCreator
from cluster_plotter.tests import create_test_entities


def create_test_data():
    """Loaded-data dict as returned by DataLoader.load_data"""
    entities = create_test_entities()
    sun = create_sun_entity()
    sun.index = len(entities)
    entities.append(sun)
    return {
        "entities": entities,
        "property_names": list(entities[0].properties.keys()),
        "magnitude_range": (-9.42, -5.17),
        "galaxy": create_galaxy_entity(),
        "source": "test.csv",
        "skipped_records": 1,
    }


class TestMainPlotCallbacks(unittest.TestCase):
    """Test cases for MainPlotCallbacks class"""

    def setUp(self):
        """Set up test fixtures"""
        self.mock_app = MagicMock()
        self.mock_data_loader = MagicMock()
        self.test_data = create_test_data()
        self.mock_data_loader.load_data.return_value = self.test_data

        self.main_plot_callbacks = MainPlotCallbacks(
            self.mock_app,
            self.mock_data_loader,
            TraceCreator(),
            FigureManager(),
        )

    def test_main_plot_callbacks_initialization(self):
        """Test MainPlotCallbacks initialization"""
        self.assertEqual(self.main_plot_callbacks.app, self.mock_app)
        self.assertEqual(self.main_plot_callbacks.data_loader, self.mock_data_loader)

    def test_callbacks_registered(self):
        """Test the scatter callback is registered with the app"""
        self.assertEqual(self.mock_app.callback.call_count, 1)

    def test_build_scatter_figure(self):
        """Test projection, trend and figure for a property selection"""
        fig, projection, trend = self.main_plot_callbacks.build_scatter_figure("Age", "[Fe/H]", "RAPO")

        # Pal5 has no Age and the Sun has no properties
        self.assertEqual(projection.size, 3)
        self.assertIsNotNone(trend)
        self.assertEqual(len(fig.data), 2)
        self.assertEqual(fig.layout.title.text, "Age vs [Fe/H]")

    def test_build_scatter_figure_with_reference(self):
        """Test the Milky Way marker is added when its properties parse"""
        fig, _, _ = self.main_plot_callbacks.build_scatter_figure(
            "[Fe/H]", "[Fe/H]", "Age", show_reference=True
        )
        self.assertEqual(len(fig.data), 3)
        self.assertEqual(fig.data[1].name, "MilkyWay")

    def test_reference_skipped_when_not_numeric(self):
        """Test the marker is omitted when the reference lacks a property"""
        fig, _, _ = self.main_plot_callbacks.build_scatter_figure(
            "Age", "RAPO", "[Fe/H]", show_reference=True
        )
        self.assertEqual(len(fig.data), 2)

    def test_build_scatter_figure_empty(self):
        """Test no complete entity gives an empty message figure"""
        fig, projection, trend = self.main_plot_callbacks.build_scatter_figure("Missing", "Age", "RAPO")
        self.assertTrue(projection.is_empty)
        self.assertIsNone(trend)
        self.assertEqual(len(fig.data), 0)
        self.assertIn("Missing", fig.layout.annotations[0].text)

    def test_create_error_plot(self):
        """Test error figure and alert"""
        fig, status = self.main_plot_callbacks._create_error_plot("boom")
        self.assertIn("boom", fig.layout.annotations[0].text)
        self.assertIsInstance(status, dbc.Alert)
        self.assertEqual(status.color, "danger")

    def test_create_status_info(self):
        """Test the status alert"""
        _, projection, trend = self.main_plot_callbacks.build_scatter_figure("Age", "[Fe/H]", "RAPO")
        status = self.main_plot_callbacks._create_status_info(projection, trend, "success")
        self.assertIsInstance(status, dbc.Alert)
        self.assertEqual(status.color, "success")


class TestSceneCallbacks(unittest.TestCase):
    """Test cases for SceneCallbacks class"""

    def setUp(self):
        """Set up test fixtures"""
        self.mock_app = MagicMock()
        self.mock_data_loader = MagicMock()
        self.test_data = create_test_data()
        self.mock_data_loader.load_data.return_value = self.test_data

        self.scene_renderer = SceneRenderer(resolution=4)
        self.orbit_simulator = OrbitalStateSimulator([])
        self.rotation_animator = RotationAnimator(step=0.5)

        self.scene_callbacks = SceneCallbacks(
            self.mock_app,
            self.mock_data_loader,
            self.scene_renderer,
            TraceCreator(),
            FigureManager(),
            self.orbit_simulator,
            self.rotation_animator,
        )

    def test_callbacks_registered(self):
        """Test mode and tick callbacks are registered"""
        self.assertEqual(self.mock_app.callback.call_count, 2)

    def test_build_scene_figure(self):
        """Test one sphere per entity followed by the axes"""
        fig = self.scene_callbacks.build_scene_figure()

        entities = self.test_data["entities"]
        self.assertIsInstance(fig, go.Figure)
        self.assertEqual(len(fig.data), len(entities) + 3)
        self.assertEqual(fig.data[len(entities) - 1].name, "Sun")
        self.assertIs(self.orbit_simulator.entities, entities)

    def test_mode_for_trigger(self):
        """Test button ids map to animation modes"""
        self.assertEqual(SceneCallbacks.mode_for_trigger("orbit-button"), "orbit")
        self.assertEqual(SceneCallbacks.mode_for_trigger("rotate-button"), "rotate")
        self.assertEqual(SceneCallbacks.mode_for_trigger("stop-button"), "stopped")
        self.assertEqual(SceneCallbacks.mode_for_trigger(None), "stopped")

    def test_orbit_tick_patches_sphere_vertices(self):
        """Test an orbit tick moves spheres and patches their vertices"""
        self.scene_callbacks.build_scene_figure()

        updates = self.scene_callbacks.orbit_updates(t=0)

        self.assertEqual(set(updates), set(range(len(self.test_data["entities"]))))
        for handle, entity in enumerate(self.test_data["entities"]):
            self.assertAlmostEqual(self.scene_renderer.center(handle)[0], entity.position.x)

    def test_orbit_tick_returns_patch(self):
        """Test the orbit mode tick result"""
        self.scene_callbacks.build_scene_figure()
        self.assertIsInstance(self.scene_callbacks.tick("orbit", t=10), Patch)

    def test_orbit_tick_without_movement(self):
        """Test a repeated tick within the same second sends nothing"""
        self.scene_callbacks.build_scene_figure()

        self.assertIsInstance(self.scene_callbacks.tick("orbit", t=100), Patch)
        self.assertIs(self.scene_callbacks.tick("orbit", t=100), no_update)

    def test_tick_holds_state_lock(self):
        """Test scene state is only touched while the lock is held"""
        self.scene_callbacks.build_scene_figure()
        lock = self.scene_callbacks._state_lock
        held = []

        def record_lock(t=None):
            held.append(lock.locked())
            return {}

        with patch.object(self.scene_callbacks, "orbit_updates", side_effect=record_lock):
            self.scene_callbacks.tick("orbit", t=5)

        self.assertEqual(held, [True])
        self.assertFalse(lock.locked())

    def test_orbit_tick_without_scene(self):
        """Test no spheres means nothing to update"""
        self.orbit_simulator.entities = self.test_data["entities"]
        self.assertIs(self.scene_callbacks.tick("orbit", t=10), no_update)

    def test_rotate_tick(self):
        """Test a rotation tick advances the camera angle"""
        result = self.scene_callbacks.tick("rotate")
        self.assertIsInstance(result, Patch)
        self.assertEqual(self.rotation_animator.angle, 0.5)

    def test_stopped_tick(self):
        """Test no update while stopped"""
        self.assertIs(self.scene_callbacks.tick("stopped"), no_update)
        self.assertEqual(self.rotation_animator.angle, 0.0)


class TestUICallbacks(unittest.TestCase):
    """Test cases for UICallbacks class"""

    def setUp(self):
        """Set up test fixtures"""
        self.mock_app = MagicMock()
        self.mock_config = MagicMock()
        self.mock_config.get_export_path.side_effect = lambda filename: f"/exports/{filename}"
        self.mock_figure_manager = MagicMock()
        self.mock_figure_manager.export_svg.side_effect = lambda fig, path: path

        self.ui_callbacks = UICallbacks(self.mock_app, self.mock_config, self.mock_figure_manager)

    def test_ui_callbacks_initialization(self):
        """Test UICallbacks initialization"""
        self.assertEqual(self.ui_callbacks.app, self.mock_app)
        self.assertEqual(self.ui_callbacks.config, self.mock_config)

    def test_callbacks_registered(self):
        """Test button label and export callbacks are registered"""
        self.assertEqual(self.mock_app.callback.call_count, 3)

    def test_generate_button_text(self):
        """Test the generate button label"""
        self.assertEqual(UICallbacks.generate_button_text(None), "📈 Generate Plot")
        self.assertEqual(UICallbacks.generate_button_text(0), "📈 Generate Plot")
        self.assertEqual(UICallbacks.generate_button_text(2), "✅ Plot Generated (2)")

    def test_export_figure(self):
        """Test export writes an SVG into the export directory"""
        figure = {"data": [{"type": "scatter"}], "layout": {}}

        path = self.ui_callbacks.export_figure(figure)

        self.assertTrue(path.startswith("/exports/cluster_scatter_"))
        self.assertTrue(path.endswith(".svg"))
        self.mock_figure_manager.export_svg.assert_called_once_with(figure, path)

    @patch("tempfile.gettempdir", return_value="/tmp/plots")
    def test_export_path_without_config(self, mock_tempdir):
        """Test exports fall back to the temp directory"""
        callbacks = UICallbacks(MagicMock(), None, self.mock_figure_manager)
        self.assertEqual(callbacks.export_path("plot.svg"), "/tmp/plots/plot.svg")


if __name__ == '__main__':
    unittest.main()
