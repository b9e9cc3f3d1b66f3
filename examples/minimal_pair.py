# examples/minimal_pair.py
from swarmalator_sim import Swarmalator

engine = Swarmalator(
    agents=2,
    positions=[0.0, 0.0, 1.0, 0.0],
    phases=[0.0, 0.0],
    natural_frequencies=[0.0, 0.0],
    K=1.0,
    J=1.0,
)

for _ in range(50):
    engine.update(0.1)

print("pos:", engine.positions)
print("vel:", engine.velocities)
print("phases:", engine.phases)
