"""
Interactive gradient mesh window.

Hold the left mouse button to steer nearby points, press 1-9 to switch
colour schemes.  Closing the window stops the animation.
"""
import matplotlib.pyplot as plt

from gradmesh import FrameDriver, SimulationConfig
from gradmesh._plotting import animate_mesh

driver = FrameDriver(SimulationConfig(node_count=200))
fig, ax, anim = animate_mesh(driver, interval=16, figsize=(9, 6))
plt.show()
driver.stop()
