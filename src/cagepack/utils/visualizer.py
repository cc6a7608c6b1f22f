"""
3D rendering of a packed cage with matplotlib.
"""

import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D
from mpl_toolkits.mplot3d.art3d import Poly3DCollection
import numpy as np
from typing import List
from matplotlib.colors import to_rgba

from cagepack.core.cage import Cage
from cagepack.core.rotation import Coordinate


PIECE_COLORS = [
    '#FF6B6B',  # red
    '#4ECDC4',  # teal
    '#45B7D1',  # blue
    '#96CEB4',  # green
    '#FFEAA7',  # yellow
    '#A29BFE',  # purple
]

CUBE_SIZE = 3


def get_piece_color(index: int) -> str:
    return PIECE_COLORS[index % len(PIECE_COLORS)]


def create_cube_vertices(pos: Coordinate, size: float = 0.9) -> np.ndarray:
    """
    Vertices of the unit cube drawn for one cell.

    Args:
        pos: Cell in cube coordinates (-1..1)
        size: Edge length, below 1 to leave a gap between cells

    Returns:
        8x3 vertex array
    """
    # Cell (-1, -1, -1) occupies [0, 1]^3 in plot space
    cx, cy, cz = pos.x + 1.5, pos.y + 1.5, pos.z + 1.5
    d = size / 2.0

    return np.array([
        [cx - d, cy - d, cz - d],
        [cx + d, cy - d, cz - d],
        [cx + d, cy + d, cz - d],
        [cx - d, cy + d, cz - d],
        [cx - d, cy - d, cz + d],
        [cx + d, cy - d, cz + d],
        [cx + d, cy + d, cz + d],
        [cx - d, cy + d, cz + d],
    ])


def create_cube_faces(vertices: np.ndarray) -> List[np.ndarray]:
    return [
        [vertices[0], vertices[1], vertices[2], vertices[3]],  # z min
        [vertices[4], vertices[5], vertices[6], vertices[7]],  # z max
        [vertices[0], vertices[1], vertices[5], vertices[4]],  # y min
        [vertices[2], vertices[3], vertices[7], vertices[6]],  # y max
        [vertices[0], vertices[3], vertices[7], vertices[4]],  # x min
        [vertices[1], vertices[2], vertices[6], vertices[5]],  # x max
    ]


def draw_voxel(ax: Axes3D, pos: Coordinate, color: str, alpha: float = 0.8,
               edge_color: str = 'black', linewidth: float = 0.8):
    faces = create_cube_faces(create_cube_vertices(pos))
    face_collection = Poly3DCollection(
        faces,
        facecolors=to_rgba(color, alpha),
        edgecolors=edge_color,
        linewidths=linewidth
    )
    ax.add_collection3d(face_collection)


def draw_box_frame(ax: Axes3D, color: str = 'gray', linewidth: float = 2.0):
    """Wireframe of the 3x3x3 container."""
    n = CUBE_SIZE
    vertices = np.array([
        [0, 0, 0],
        [n, 0, 0],
        [n, n, 0],
        [0, n, 0],
        [0, 0, n],
        [n, 0, n],
        [n, n, n],
        [0, n, n],
    ])

    edges = [
        [0, 1], [1, 2], [2, 3], [3, 0],  # bottom
        [4, 5], [5, 6], [6, 7], [7, 4],  # top
        [0, 4], [1, 5], [2, 6], [3, 7],  # verticals
    ]

    for edge in edges:
        points = vertices[edge]
        ax.plot3D(*points.T, color=color, linewidth=linewidth, alpha=0.3)


def render_cage(cage: Cage, title: str = "Packing") -> plt.Figure:
    """
    Draw every piece of a cage in its own colour.

    Args:
        cage: Cage to draw
        title: Figure title

    Returns:
        matplotlib Figure
    """
    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111, projection='3d')

    draw_box_frame(ax)
    for index, piece in enumerate(cage.pieces):
        color = get_piece_color(index)
        for cell in piece.coordinates():
            draw_voxel(ax, cell, color, alpha=0.9)

    ax.set_xlim([0, CUBE_SIZE])
    ax.set_ylim([0, CUBE_SIZE])
    ax.set_zlim([0, CUBE_SIZE])
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_zticks([])
    ax.view_init(elev=20, azim=45)
    ax.set_title(f"{title} ({cage.piece_count} pieces)", fontsize=12, fontweight='bold')

    return fig


def save_cage_visualization(cage: Cage, filename: str, title: str = "Packing", dpi: int = 150):
    """Render a cage to an image file and close the figure."""
    fig = render_cage(cage, title=title)
    fig.savefig(filename, dpi=dpi, bbox_inches='tight', facecolor='white')
    plt.close(fig)
