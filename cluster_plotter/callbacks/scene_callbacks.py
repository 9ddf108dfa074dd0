"""
Scene callbacks for the cluster plotter.

Builds the 3D cluster scene and drives its animation: a dcc.Interval tick
either advances the orbital positions (patching sphere vertices) or the
camera rotation (patching the scene camera).
"""

import threading

from dash import Input, Output, Patch, State, callback_context, no_update

ANIMATION_MODES = {
    "orbit-button": "orbit",
    "rotate-button": "rotate",
    "stop-button": "stopped",
}


class SceneCallbacks:
    """Handles 3D scene construction and animation callbacks"""

    def __init__(self, app, data_loader, scene_renderer, trace_creator, figure_manager,
                 orbit_simulator, rotation_animator):
        """
        Initialize scene callbacks.

        Args:
            app: Dash application instance
            data_loader: DataLoader instance for data operations
            scene_renderer: SceneRenderer holding the sphere meshes and handles
            trace_creator: TraceCreator instance for axis traces
            figure_manager: FigureManager instance for scene layout and camera
            orbit_simulator: OrbitalStateSimulator over the loaded entities
            rotation_animator: RotationAnimator for the camera angle
        """
        self.app = app
        self.data_loader = data_loader
        self.scene_renderer = scene_renderer
        self.trace_creator = trace_creator
        self.figure_manager = figure_manager
        self.orbit_simulator = orbit_simulator
        self.rotation_animator = rotation_animator

        # Interval ticks may arrive on concurrent server threads
        self._state_lock = threading.Lock()

        self.setup_callbacks()

    def setup_callbacks(self):
        """Setup all scene callbacks"""
        self._setup_animation_mode_callback()
        self._setup_tick_callback()

    def build_scene_figure(self):
        """(Re)build the sphere scene from the loaded entities and return its figure"""
        entities = self.data_loader.load_data()["entities"]
        with self._state_lock:
            self.scene_renderer.build(entities)
            self.orbit_simulator.entities = entities
            self.rotation_animator.reset()

        extent = max(
            (max(abs(entity.position.x), abs(entity.position.y), abs(entity.position.z))
             for entity in entities),
            default=1.0,
        )
        axis_traces = self.trace_creator.create_axis_traces(length=max(extent * 0.25, 1.0))
        return self.figure_manager.create_scene_figure(self.scene_renderer.traces(), axis_traces)

    def _setup_animation_mode_callback(self):
        """Setup orbit / rotate / stop buttons"""

        @self.app.callback(
            [
                Output("animation-mode", "data"),
                Output("animation-interval", "disabled"),
                Output("animation-status", "children"),
            ],
            [
                Input("orbit-button", "n_clicks"),
                Input("rotate-button", "n_clicks"),
                Input("stop-button", "n_clicks"),
            ],
            prevent_initial_call=True,
        )
        def set_animation_mode(orbit_clicks, rotate_clicks, stop_clicks):
            ctx = callback_context
            mode = self.mode_for_trigger(ctx.triggered_id)
            return mode, mode == "stopped", self.describe_mode(mode)

    def _setup_tick_callback(self):
        """Setup the periodic animation tick"""

        @self.app.callback(
            Output("scene-plot", "figure"),
            Input("animation-interval", "n_intervals"),
            State("animation-mode", "data"),
            prevent_initial_call=True,
        )
        def on_animation_tick(n_intervals, mode):
            return self.tick(mode)

    @staticmethod
    def mode_for_trigger(triggered_id):
        return ANIMATION_MODES.get(triggered_id, "stopped")

    @staticmethod
    def describe_mode(mode):
        return {
            "orbit": "🪐 Orbit animation running",
            "rotate": "🔄 Camera rotation running",
        }.get(mode, "Animation stopped")

    def orbit_updates(self, t=None):
        """
        Advance the orbits one tick.

        Returns:
            Dict of handle -> (x, y, z) vertex lists for the moved spheres
        """
        applied = self.orbit_simulator.step(self.scene_renderer, t)
        return {handle: self.scene_renderer.vertices(handle) for handle in applied}

    def tick(self, mode, t=None):
        """Run one animation tick and return a figure Patch (or no_update)"""
        with self._state_lock:
            return self._tick(mode, t)

    def _tick(self, mode, t):
        if mode == "orbit":
            updates = self.orbit_updates(t)
            if not updates:
                return no_update
            patched = Patch()
            for handle, (x, y, z) in updates.items():
                patched["data"][handle]["x"] = x
                patched["data"][handle]["y"] = y
                patched["data"][handle]["z"] = z
            return patched

        if mode == "rotate":
            angle = self.rotation_animator.tick()
            patched = Patch()
            patched["layout"]["scene"]["camera"] = self.figure_manager.rotated_camera(angle)
            return patched

        return no_update
