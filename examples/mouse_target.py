# examples/mouse_target.py
# The target follows a point circling the origin, as if dragged by a mouse.
import numpy as np

from swarmalator_sim import Simulation, demo_config
from swarmalator_sim.renderer import BufferedRenderer

renderer = BufferedRenderer()
sim = Simulation.from_config(demo_config(agents=100, seed=2), renderer=renderer)

for k in range(300):
    angle = 0.02 * k
    sim.engine.set_target((2.0 * np.cos(angle), 2.0 * np.sin(angle)))
    sim.tick()

print("frames:", len(renderer.frames))
print("finite:", sim.is_finite())
print(sim.fps.render())
