# examples/chiral_split.py
# Two counter-rotating populations; the text renderer prints the last frame.
import logging

from swarmalator_sim import Simulation, chiral_demo_config
from swarmalator_sim.renderer import DebugRenderer

logging.basicConfig(level=logging.INFO)

sim = Simulation.from_config(chiral_demo_config(agents=20, seed=1))
sim.run(100)
DebugRenderer().render_swarm(sim.engine, sim.time)
