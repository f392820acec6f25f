"""Human-readable configuration summary."""

from __future__ import annotations

from sstdr_twin.config import Modulation
from sstdr_twin.models import ResolvedConfiguration
from sstdr_twin.resolver import export_parameters


def format_summary(resolved: ResolvedConfiguration) -> str:
    """Return the multi-line summary printed after a configuration is loaded."""

    pn = resolved.pn_params
    corr = resolved.correlation_params
    sim = resolved.simulation_params
    result = resolved.generation_result
    exported = export_parameters(resolved)

    lines = [
        "=== SSTDR Configuration Summary ===",
        f"Configuration: {resolved.name}",
        "PN Sequence:",
        f"  - Length: {pn.pn_bits} bits ({result.pn_sequence_length} chips)",
        f"  - Modulation: {pn.modulation.value}",
        "Frequencies:",
        f"  - Chip rate: {pn.chip_rate / 1e3:.1f} kHz ({1e6 / pn.chip_rate:.3f} us per chip)",
    ]
    if pn.modulation is not Modulation.NONE:
        lines.append(f"  - Carrier frequency: {pn.carrier_freq / 1e3:.1f} kHz")
        lines.append(f"  - Frequency ratio: {pn.carrier_freq / pn.chip_rate:.1f}x (carrier/chip)")
    lines += [
        f"  - Sampling frequency: {pn.sample_rate / 1e3:.1f} kHz",
        f"  - Sampling ratio: {pn.samples_per_chip:.1f}x (fs/chip_rate)",
        f"  - Duration: {result.total_duration * 1e3:.3f} ms",
        "Correlation:",
        f"  - Method: {corr.method.value}",
        f"  - Peak threshold: {corr.peak_threshold:.2f}",
        "Simulation:",
        f"  - Stop time: {sim.stop_time * 1e3:.3f} ms",
        f"  - Solver: {sim.solver}",
        f"  - Max step: {sim.max_step * 1e6:.1f} us",
        "Exported Variables:",
        f"  - sim_fs: {exported.sim_fs:.0f} Hz (sampling frequency)",
        f"  - sim_ts: {exported.sim_ts:.2e} s (sample time)",
        f"  - sim_chip_rate: {exported.sim_chip_rate:.0f} Hz (chip rate)",
        f"  - sim_decimation: {exported.sim_decimation} (interpolation factor)",
    ]
    return "\n".join(lines)
