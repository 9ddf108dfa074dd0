"""
App layout for the cluster plotter.

Contains the complete Dash layout definition with sidebar controls, the 3D
cluster scene and the property scatter plot in a responsive design.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html


class AppLayout:
    """Handles the main application layout"""

    @staticmethod
    def create_layout(property_names=None, scene_figure=None, scatter_figure=None, interval_ms=16):
        """
        Create and return the complete app layout.

        Args:
            property_names: Property keys offered in the axis dropdowns
            scene_figure: Initial 3D scene figure
            scatter_figure: Initial (empty) scatter figure
            interval_ms: Animation tick interval in milliseconds
        """
        property_names = property_names or []

        return dbc.Container([
            # Header row
            dbc.Row([
                dbc.Col([
                    html.H1("Globular Cluster Plotter", className="text-center mb-3"),
                ])
            ], className="mb-3"),

            # Main horizontal layout: Controls sidebar + Plot area
            dbc.Row([
                # Left sidebar with controls
                dbc.Col([
                    dbc.Card([
                        dbc.CardHeader([
                            html.Div([
                                html.I(className="fas fa-sliders-h me-2 text-white"),
                                html.H5("Visualization Controls", className="mb-0 d-inline-block text-white"),
                            ], className="d-flex align-items-center justify-content-center")
                        ], style={
                            'background': 'linear-gradient(135deg, #667eea 0%, #764ba2 100%)',
                            'border-radius': '15px 15px 0 0'
                        }),
                        dbc.CardBody([
                            AppLayout._create_property_section(property_names),
                            AppLayout._create_generate_section(),

                            html.Hr(className="border-primary my-4"),

                            AppLayout._create_animation_section(),

                            html.Hr(className="border-primary my-4"),

                            AppLayout._create_export_section(),
                        ], style={'overflow-y': 'auto', 'max-height': 'calc(100vh - 200px)'})
                    ], className="h-100 shadow-lg border-0", style={'border-radius': '15px'})
                ], width=2, className="pe-3"),

                # Right side: scene, scatter plot and status
                dbc.Col([
                    dbc.Row([
                        dbc.Col([
                            dcc.Loading(
                                id="loading-scene",
                                children=[
                                    dcc.Graph(
                                        id='scene-plot',
                                        figure=scene_figure if scene_figure is not None else {},
                                        style={'height': '75vh', 'width': '100%', 'min-height': '500px'},
                                        config={
                                            'displayModeBar': True,
                                            'displaylogo': False,
                                            'responsive': True
                                        }
                                    )
                                ],
                                type="circle"
                            )
                        ], width=6),

                        dbc.Col([
                            dcc.Loading(
                                id="loading-scatter",
                                children=[
                                    dcc.Graph(
                                        id='scatter-plot',
                                        figure=scatter_figure if scatter_figure is not None else {},
                                        style={'height': '75vh', 'width': '100%', 'min-height': '500px'},
                                        config={
                                            'displayModeBar': True,
                                            'displaylogo': False,
                                            'modeBarButtonsToRemove': ['lasso2d', 'select2d'],
                                            'toImageButtonOptions': {'format': 'svg', 'filename': 'cluster_scatter'},
                                            'responsive': True
                                        }
                                    )
                                ],
                                type="circle"
                            )
                        ], width=6),
                    ], className="g-0"),

                    # Status information
                    dbc.Row([
                        dbc.Col([
                            html.Div(id="status-info", className="mt-3")
                        ])
                    ]),
                ], width=10),
            ], className="g-0"),

            # Animation timer and state
            dcc.Interval(id="animation-interval", interval=interval_ms, n_intervals=0, disabled=True),
            dcc.Store(id="animation-mode", data="stopped"),
            dcc.Download(id="export-download"),

        ], fluid=True, className="px-3")

    @staticmethod
    def _create_property_section(property_names):
        """Create X/Y/color property selection dropdowns"""
        options = [{'label': name, 'value': name} for name in property_names]

        def dropdown(component_id, label, icon):
            return html.Div([
                html.Div([
                    html.I(className=f"fas {icon} me-2 text-primary"),
                    html.Label(label, className="fw-bold mb-0")
                ], className="d-flex align-items-center mb-2"),
                dcc.Dropdown(
                    id=component_id,
                    options=options,
                    value=None,
                    placeholder="Select property...",
                    clearable=True,
                    style={'border-radius': '8px'}
                )
            ], className="mb-3")

        return html.Div([
            dropdown('x-property-dropdown', "X Axis:", "fa-arrows-alt-h"),
            dropdown('y-property-dropdown', "Y Axis:", "fa-arrows-alt-v"),
            dropdown('color-property-dropdown', "Color:", "fa-palette"),
        ])

    @staticmethod
    def _create_generate_section():
        """Create generate button and reference marker switch"""
        return html.Div([
            dbc.Switch(
                id="reference-switch",
                label="Show Milky Way reference",
                value=False,
                className="mb-2"
            ),
            dbc.Button(
                "📈 Generate Plot",
                id="generate-button",
                color="primary",
                n_clicks=0,
                className="w-100"
            ),
        ])

    @staticmethod
    def _create_animation_section():
        """Create orbit / rotation animation controls"""
        return html.Div([
            html.Div([
                html.I(className="fas fa-sync-alt me-2 text-primary"),
                html.Label("Animation:", className="fw-bold mb-0")
            ], className="d-flex align-items-center mb-2"),
            dbc.ButtonGroup([
                dbc.Button("🪐 Orbit", id="orbit-button", color="success", n_clicks=0),
                dbc.Button("🔄 Rotate", id="rotate-button", color="info", n_clicks=0),
                dbc.Button("⏹ Stop", id="stop-button", color="secondary", n_clicks=0),
            ], className="w-100"),
            html.Small(id="animation-status", children="Animation stopped",
                       className="text-muted d-block mt-2"),
        ])

    @staticmethod
    def _create_export_section():
        """Create SVG export button"""
        return html.Div([
            dbc.Button(
                "💾 Export Plot (SVG)",
                id="export-button",
                color="primary",
                outline=True,
                n_clicks=0,
                className="w-100"
            ),
        ])
