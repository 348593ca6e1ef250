import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from simplelaunay.Mesh.vertex import as_coordinates


def draw_triangulation(points, triangles, show=True,
                       draw_vertices=True,
                       label_vertices=False,
                       super_vertices=None,
                       ax=None):
    """
    Plot a triangulation.

    points         : (n, 2) array-like or sequence of Vertex
    triangles      : flat index sequence or (m, 3) array
    super_vertices : optional (3, 2) array, drawn as a dashed outline
    Returns the matplotlib Axes.
    """
    coords = as_coordinates(points)
    triangles = np.asarray(triangles).reshape(-1, 3)

    if ax is None:
        plt.figure()
        ax = plt.gca()

    cmap = plt.get_cmap('tab10')
    face_color = cmap(2)
    vertex_color = cmap(0)
    super_color = cmap(7)

    # 1) face boundaries, bottom layer
    if len(triangles):
        ax.triplot(coords[:, 0], coords[:, 1], triangles, color=face_color, linewidth=1.5, zorder=1)

    # 2) vertices
    if draw_vertices:
        ax.plot(coords[:, 0], coords[:, 1], 'o', color=vertex_color, zorder=2)
        if label_vertices:
            for idx, (x, y) in enumerate(coords.tolist()):
                ax.text(x, y, f"{idx}", color="blue", fontsize=10, zorder=3)

    if super_vertices is not None:
        outline = np.vstack([super_vertices, super_vertices[:1]])
        ax.plot(outline[:, 0], outline[:, 1], '--', color=super_color, zorder=0)

    ax.axis('equal')
    ax.set_title(f"Delaunay Triangulation ({len(triangles)} triangles)")

    legend_handles = [Line2D([0], [0], color=face_color, linewidth=2, label='Triangle edge')]
    if draw_vertices:
        legend_handles.append(
            Line2D([0], [0], marker='o', color=vertex_color, linestyle='None', label='Vertex')
        )
    if super_vertices is not None:
        legend_handles.append(
            Line2D([0], [0], color=super_color, linestyle='--', label='Super triangle')
        )
    ax.legend(handles=legend_handles, loc='best')

    if show:
        plt.show()
    return ax


if __name__ == "__main__":
    from simplelaunay.RandomPoints import random_points_in_box
    from simplelaunay.BowyerWatson import triangulate

    points = random_points_in_box(50)
    draw_triangulation(points, triangulate(points), label_vertices=True)
