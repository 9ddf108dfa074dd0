#!/usr/bin/env python3
"""
Globular Cluster Plotter Dash App

Interactive visualization of a globular cluster survey table. The app runs as
a web server and shows:
- A 3D map of the clusters as spheres (size from absolute magnitude, color
  from metallicity) with orbit and camera rotation animation
- A scatter plot of any two cluster properties, colored by a third, with a
  least-squares trend line
- SVG export of the scatter plot

USAGE:
- Default config: cluster-plotter
- Custom config:  cluster-plotter --config /path/to/custom_config.ini
- Other table:    cluster-plotter --data /path/to/clusters.csv
- External access: cluster-plotter --external
"""

import argparse
import sys

import dash
import dash_bootstrap_components as dbc

from cluster_plotter.callbacks import MainPlotCallbacks, SceneCallbacks, UICallbacks
from cluster_plotter.core import ClusterVisualizationCore
from cluster_plotter.src.animation import OrbitalStateSimulator, RotationAnimator
from cluster_plotter.src.config import ConfigFromEnv
from cluster_plotter.src.data import DataLoader, DatasetError
from cluster_plotter.src.visualization import FigureManager, SceneRenderer, TraceCreator
from cluster_plotter.ui import AppLayout


def parse_arguments(argv=None):
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        description='Globular Cluster Plotter Dash App',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                    # Use default config (config_local.ini or config.ini)
  %(prog)s --config /path/to/custom.ini       # Use custom config file
  %(prog)s --data /path/to/clusters.csv       # Override the configured data file
  %(prog)s --external                         # Allow external access (0.0.0.0)
        """
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to custom configuration file (default: auto-detect config_local.ini or config.ini)'
    )
    parser.add_argument(
        '--data',
        type=str,
        default=None,
        help='Path to the cluster table (CSV or FITS), overrides paths.data_file'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=None,
        help='Port to serve on (default: server.port from the configuration)'
    )
    parser.add_argument(
        '--external',
        action='store_true',
        help='Allow external access to the app (binds to 0.0.0.0 instead of localhost)'
    )
    parser.add_argument(
        '--remote',
        action='store_true',
        help='Alias for --external'
    )
    return parser.parse_args(argv)


def load_configuration(args):
    """Create the configuration from the command line arguments"""
    if args.config:
        print(f"📋 Using custom configuration file: {args.config}")
    else:
        print("📋 Using default configuration (auto-detect)")
    config = ConfigFromEnv(config_file=args.config)

    if args.data:
        config.data_file = args.data
        print(f"📋 Using data file from command line: {args.data}")

    print("✓ Configuration loaded successfully")
    return config


class ClusterPlotterApp:
    def __init__(self, config):
        self.config = config

        # Initialize Dash app with Bootstrap and Font Awesome
        external_stylesheets = [
            dbc.themes.BOOTSTRAP,
            "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.0.0/css/all.min.css"
        ]
        self.app = dash.Dash(__name__, external_stylesheets=external_stylesheets,
                             title="Globular Cluster Plotter")

        # Data handling
        self.data_loader = DataLoader(config)
        self.data = self.data_loader.load_data()

        # Visualization
        self.trace_creator = TraceCreator()
        self.figure_manager = FigureManager()
        self.scene_renderer = SceneRenderer()
        print("✓ Visualization modules initialized")

        # Animation state
        self.orbit_simulator = OrbitalStateSimulator(self.data["entities"])
        self.rotation_animator = RotationAnimator(step=config.rotation_step)

        self.setup_callbacks()

        self.app.layout = AppLayout.create_layout(
            property_names=self.data["property_names"],
            scene_figure=self.scene_callbacks.build_scene_figure(),
            scatter_figure=self.figure_manager.create_empty_figure(),
            interval_ms=config.interval_ms,
        )
        print("✓ Layout created")

        self.core = ClusterVisualizationCore(self.app)

    def setup_callbacks(self):
        """Setup Dash callbacks"""
        self.main_plot_callbacks = MainPlotCallbacks(
            self.app, self.data_loader, self.trace_creator, self.figure_manager
        )

        self.scene_callbacks = SceneCallbacks(
            self.app, self.data_loader, self.scene_renderer, self.trace_creator,
            self.figure_manager, self.orbit_simulator, self.rotation_animator
        )

        self.ui_callbacks = UICallbacks(self.app, self.config, self.figure_manager)

        print("✓ All callbacks initialized")

    def run(self, host='localhost', port=8050, debug=False, auto_open=True, external_access=False):
        """Run the Dash app"""
        return self.core.run(host, port, debug, auto_open, external_access)


def main(argv=None):
    """Main function to run the app"""
    args = parse_arguments(argv)
    config = load_configuration(args)

    external_access = args.external or args.remote
    if external_access:
        print("🌐 External access enabled (binding to 0.0.0.0)")
    else:
        print("🔒 Local access only")

    try:
        app = ClusterPlotterApp(config)
    except DatasetError as e:
        print(f"❌ ERROR: Could not load cluster data: {e}")
        sys.exit(1)

    first_port = args.port or config.port
    app.core.try_multiple_ports(
        ports=[first_port, first_port + 1, first_port + 2, first_port + 3],
        host=config.host,
        debug=False,
        auto_open=not external_access,
        external_access=external_access,
    )


if __name__ == '__main__':
    main()
