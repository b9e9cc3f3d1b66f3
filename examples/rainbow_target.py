# examples/rainbow_target.py
# 200 agents with phases spread around the circle, steered by a target at (2, 0).
import logging

from swarmalator_sim import Simulation, demo_config
from swarmalator_sim.core import phase_order_parameter, mixed_order_parameters
from swarmalator_sim.profiler import Profiler

logging.basicConfig(level=logging.INFO)

prof = Profiler()
sim = Simulation.from_config(demo_config(agents=200, seed=0), profiler=prof)
sim.run(200)

engine = sim.engine
print("t:", sim.time)
print("R:", phase_order_parameter(engine.phases))
print("S+, S-:", mixed_order_parameters(engine.positions, engine.phases))
print("update:", prof.summary()["pairwise"])
