# demos/demo_work_envelope.py
import argparse
import logging
import os

import matplotlib.pyplot as plt

from envelope.config import EnvelopeConfig, MirrorSeam
from envelope.work_envelope import compute_work_envelope
from utils.visualization import EnvelopeView, plot_work_envelope


def parse_args(argv=None):
    # ===== Parameters =====
    dof = 4
    reach = 25.0
    angle_increment = 15.0
    max_angle = 90.0
    out_dir = "outputs_work_envelope"
    # ======================

    parser = argparse.ArgumentParser(description="Grid-counted work envelope of an equal-link articulated arm")
    parser.add_argument("--dof", type=int, default=dof, help=f"Number of joints, 1..9 (default {dof})")
    parser.add_argument("--reach", type=float, default=reach, help=f"Total reach in cm (default {reach})")
    parser.add_argument("--increment", type=float, default=angle_increment, help=f"Angle step in degrees (default {angle_increment})")
    parser.add_argument("--max-angle", type=float, default=max_angle, help=f"Joint limit +-deg, at most 180 (default {max_angle})")
    parser.add_argument("--processes", type=int, default=None, help="Worker processes (default CPU-1, 1 = no pool)")
    parser.add_argument("--seam", choices=[s.value for s in MirrorSeam], default=MirrorSeam.DOUBLE.value,
                        help="Overlap handling when mirroring the halved first joint (default double)")
    parser.add_argument("--out-dir", default=out_dir, help=f"Directory for the figure (default {out_dir})")
    parser.add_argument("--show", action="store_true", help="Open the interactive figure")
    parser.add_argument("--verbose", action="store_true", help="Log worker progress")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = EnvelopeConfig(
        dof=args.dof,
        reach=args.reach,
        angle_increment=args.increment,
        max_angle=args.max_angle,
    )

    result = compute_work_envelope(config, processes=args.processes, seam=args.seam)
    print(result.summary.text())

    view = EnvelopeView(azim=0.0, elev=90.0)
    fig, _ = plot_work_envelope(
        result.summary.as_array(),
        view=view,
        title=f"3D Diagram of Work Envelope (DOF={config.dof}, reach={config.reach:g} cm)",
    )

    os.makedirs(args.out_dir, exist_ok=True)
    fname = os.path.join(args.out_dir, f"work_envelope_dof{config.dof}.png")
    fig.savefig(fname, dpi=300)
    print(f"Saved: {fname}")

    if args.show:
        plt.show()
    plt.close(fig)

    print(f"Elapsed time is {result.elapsed:.6f} seconds.")
    return result


if __name__ == "__main__":
    main()
