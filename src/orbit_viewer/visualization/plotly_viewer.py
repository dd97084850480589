from __future__ import annotations

import logging
import math
from pathlib import Path

import plotly.graph_objects as go

from orbit_viewer.core.frames import Vector3
from orbit_viewer.simulation.engine import AnimationLog

logger = logging.getLogger(__name__)

# Display radius of the central body (AU); not to scale
SUN_DISPLAY_RADIUS_AU: float = 0.08


def _sphere_mesh(center: Vector3, radius: float, n_lat: int = 16, n_lon: int = 32):
    # Parametric sphere around the central-body marker
    cx, cy, cz = center
    lats = [(-math.pi / 2) + i * (math.pi / (n_lat - 1)) for i in range(n_lat)]
    lons = [(-math.pi) + j * (2 * math.pi / (n_lon - 1)) for j in range(n_lon)]

    x = []
    y = []
    z = []
    for lat in lats:
        x.append([cx + radius * math.cos(lat) * math.cos(lon) for lon in lons])
        y.append([cy + radius * math.cos(lat) * math.sin(lon) for lon in lons])
        z.append([cz + radius * math.sin(lat) for _lon in lons])
    return x, y, z


def _base_figure(log: AnimationLog, show_sun: bool) -> go.Figure:
    fig = go.Figure()

    if show_sun and log.focus_marker_au is not None:
        sx, sy, sz = _sphere_mesh(log.focus_marker_au, SUN_DISPLAY_RADIUS_AU)
        fig.add_trace(go.Surface(
            x=sx, y=sy, z=sz,
            showscale=False,
            opacity=0.9,
            colorscale=[[0, "gold"], [1, "orange"]],
            name="Sun",
        ))

    fig.add_trace(go.Scatter3d(
        x=[r[0] for r in log.curve_au],
        y=[r[1] for r in log.curve_au],
        z=[r[2] for r in log.curve_au],
        mode="lines",
        name=f"{log.body_id} orbit",
    ))
    return fig


def _scene_layout(title: str) -> dict:
    return dict(
        title=title,
        scene=dict(
            xaxis_title="X (AU)",
            yaxis_title="Y (AU)",
            zaxis_title="Z (AU)",
            aspectmode="data",
        ),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
    )


def render_orbit_scene(
    log: AnimationLog,
    out_html: str = "out/orbit_scene.html",
    show_sun: bool = True,
) -> str:
    """
    Renders a static 3D scene:
      - Central body at the focus marker
      - Orbit curve
      - Last recorded body position
    """
    if not log.curve_au:
        raise ValueError("Log has no orbit curve to render.")

    fig = _base_figure(log, show_sun)

    if log.positions_au:
        _theta, r = log.positions_au[-1]
        fig.add_trace(go.Scatter3d(
            x=[r[0]], y=[r[1]], z=[r[2]],
            mode="markers",
            name=f"{log.body_id} now",
            marker=dict(size=5),
        ))

    fig.update_layout(**_scene_layout(f"Orbit of {log.body_id}"))

    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    logger.info("Wrote %s", out_html)
    return out_html


def render_animated_orbit(
    log: AnimationLog,
    out_html: str = "out/orbit_animated.html",
    show_sun: bool = True,
    frame_duration_ms: int = 30,
) -> str:
    """
    Renders an animated 3D scene:
      - Central body
      - Full orbit curve
      - A marker moving through the recorded positions
    """
    if not log.positions_au:
        raise ValueError("Log has no recorded positions to animate.")

    fig = _base_figure(log, show_sun)
    xs = [r[0] for (_theta, r) in log.positions_au]
    ys = [r[1] for (_theta, r) in log.positions_au]
    zs = [r[2] for (_theta, r) in log.positions_au]
    thetas = [theta for (theta, _r) in log.positions_au]

    fig.add_trace(go.Scatter3d(
        x=[xs[0]], y=[ys[0]], z=[zs[0]],
        mode="markers",
        name=f"{log.body_id} marker",
        marker=dict(size=6),
    ))
    # Frames update the marker trace (the last trace)
    marker_index = len(fig.data) - 1

    fig.frames = [
        go.Frame(
            name=str(i),
            data=[go.Scatter3d(x=[xs[i]], y=[ys[i]], z=[zs[i]], mode="markers", marker=dict(size=6))],
            traces=[marker_index],
        )
        for i in range(len(thetas))
    ]

    fig.update_layout(
        **_scene_layout(f"Animated orbit: {log.body_id}"),
        updatemenus=[dict(
            type="buttons",
            showactive=True,
            buttons=[
                dict(label="Play", method="animate",
                     args=[None, {"frame": {"duration": frame_duration_ms, "redraw": True}, "fromcurrent": True}]),
                dict(label="Pause", method="animate",
                     args=[[None], {"frame": {"duration": 0, "redraw": False}, "mode": "immediate"}]),
            ],
        )],
        sliders=[dict(
            steps=[dict(method="animate", args=[[str(i)], {"mode": "immediate", "frame": {"duration": 0, "redraw": True}}],
                        label=f"{thetas[i]:.2f} rad") for i in range(0, len(thetas), max(1, len(thetas)//20))],
            active=0,
        )],
    )

    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    logger.info("Wrote %s", out_html)
    return out_html
