"""
Single gradient mesh frame.

Scatters points over a viewport, advances them for one second of frame
time, then draws the shaded Delaunay mesh of the final frame with its
triangle edges.
"""
import matplotlib.pyplot as plt

from gradmesh import FrameDriver, SimulationConfig, Viewport
from gradmesh._render import MatplotlibRenderer

config = SimulationConfig(node_count=150, draw_lines=True, seed=42)
driver = FrameDriver(config, viewport=Viewport(640, 480))

frame = driver.run(60)
print(f"{len(frame.points)} points, {len(frame)} triangles")

fig, ax = plt.subplots(figsize=(6.4, 4.8))
driver.renderer = MatplotlibRenderer(ax)
driver.renderer.draw(driver.scenes)

ax.set_xlim(0, 640)
ax.set_ylim(480, 0)
ax.set_aspect('equal')
ax.set_xticks([])
ax.set_yticks([])
plt.tight_layout()
plt.show()
