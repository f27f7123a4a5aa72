"""
Colour transition curves.

Requests combo 4 and, while that transition runs, combo 8.  Plots the red,
green and blue channels of both gradient end points against time: the
queued transition starts the moment the first one snaps to its target.
"""
import numpy as np
import matplotlib.pyplot as plt

from gradmesh import TransitionState

state = TransitionState(initial=2)
state.request_combo(3)
state.request_combo(7)

dt = 1 / 60
t, from_rgb, to_rgb = [], [], []
for i in range(150):
    t.append(i * dt)
    from_rgb.append(list(state.from_color))
    to_rgb.append(list(state.to_color))
    state.step(dt)

from_rgb = np.array(from_rgb)
to_rgb = np.array(to_rgb)

fig, (ax0, ax1) = plt.subplots(2, 1, sharex=True, figsize=(7, 5))
for k, name in enumerate('rgb'):
    ax0.plot(t, from_rgb[:, k], color=name, label=name)
    ax1.plot(t, to_rgb[:, k], color=name, label=name)
ax0.set_ylabel('from_color')
ax1.set_ylabel('to_color')
ax1.set_xlabel('time (s)')
ax0.legend()
plt.tight_layout()
plt.show()
