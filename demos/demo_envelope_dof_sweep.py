# demos/demo_envelope_dof_sweep.py
import os

import matplotlib.pyplot as plt

from envelope.config import EnvelopeConfig
from envelope.summary import hull_volume
from envelope.work_envelope import compute_work_envelope


def sweep_dof(dof_list, reach, angle_increment, max_angle, processes=None):
    """Return {dof: (unique_count, total_count, hull_volume_cm3)}."""
    results = {}
    for dof in dof_list:
        config = EnvelopeConfig(dof=dof, reach=reach,
                                angle_increment=angle_increment, max_angle=max_angle)
        env = compute_work_envelope(config, processes=processes)
        results[dof] = (
            env.summary.unique_count,
            env.summary.total_count,
            hull_volume(env.summary.as_array()),
        )
        print(f"DOF={dof}: {env.summary.text()}, hull volume {results[dof][2]:.0f} cm^3")
    return results


def main():
    # ===== Parameters =====
    reach = 25.0
    dof_list = [1, 2, 3, 4, 5]
    angle_increment = 30.0
    max_angle = 90.0
    out_dir = "outputs_envelope_dof_sweep"
    # ======================

    os.makedirs(out_dir, exist_ok=True)
    print(f"=== Work envelope vs DOF (reach={reach} cm, step={angle_increment} deg) ===")

    results = sweep_dof(dof_list, reach, angle_increment, max_angle)

    fig, axes = plt.subplots(1, 2, figsize=(11, 4.5))

    axes[0].plot(dof_list, [results[n][0] for n in dof_list],
                 linewidth=2, marker="o", markersize=4)
    axes[0].set_xlabel("DOF")
    axes[0].set_ylabel("Unique grid cells")
    axes[0].set_title("Reachable cells")
    axes[0].grid(True)

    axes[1].plot(dof_list, [results[n][2] for n in dof_list],
                 linewidth=2, marker="o", markersize=4, color="tab:orange")
    axes[1].set_xlabel("DOF")
    axes[1].set_ylabel("Hull volume (cm³)")
    axes[1].set_title("Convex hull of reachable cells")
    axes[1].grid(True)

    fig.tight_layout()
    fname = os.path.join(out_dir, "envelope_vs_dof.png")
    fig.savefig(fname, dpi=300)
    plt.close(fig)

    print(f"Saved figure to: {fname}")


if __name__ == "__main__":
    main()
