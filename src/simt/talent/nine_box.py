"""BoxClassifier: 9-box placement per Permenpan RB No. 3 Tahun 2020.

Rows of ``BOX_GRID`` are potential tiers, columns are performance tiers,
both indexed from tier 1 (low) to tier 3 (high).
"""

from __future__ import annotations

from simt.models.employee import Employee
from simt.models.talent import BoxInfo
from simt.talent.scaling import performance_scale, potential_scale

UNCLASSIFIED_BOX = 0
UNCLASSIFIED_CATEGORY = "Tidak terklasifikasi"

#            perf:  1  2  3
BOX_GRID: tuple[tuple[int, int, int], ...] = (
    (1, 2, 4),  # potential 1 (Rendah)
    (3, 5, 7),  # potential 2 (Menengah)
    (6, 8, 9),  # potential 3 (Tinggi)
)

CATEGORIES: dict[int, str] = {
    9: "Kinerja di atas ekspektasi dan potensial tinggi",
    8: "Kinerja sesuai ekspektasi dan potensial tinggi",
    7: "Kinerja di atas ekspektasi dan potensial menengah",
    6: "Kinerja di bawah ekspektasi dan potensial tinggi",
    5: "Kinerja sesuai ekspektasi dan potensial menengah",
    4: "Kinerja di atas ekspektasi dan potensial rendah",
    3: "Kinerja di bawah ekspektasi dan potensial menengah",
    2: "Kinerja sesuai ekspektasi dan potensial rendah",
    1: "Kinerja di bawah ekspektasi dan potensial rendah",
}

RECOMMENDATIONS: dict[int, str] = {
    9: "Dipromosikan dan dipertahankan, Masuk Kelompok Rencana Suksesi Instansi/Nasional, Penghargaan.",
    8: "Dipertahankan, Masuk Kelompok Rencana Suksesi Instansi, Rotasi/Perluasan jabatan, Bimbingan kinerja.",
    7: (
        "Dipertahankan, Masuk Kelompok Rencana Suksesi Instansi, Rotasi/Pengayaan jabatan, "
        "Pengembangan kompetensi, Tugas belajar."
    ),
    6: "Penempatan yang sesuai, Bimbingan kinerja, Konseling kinerja.",
    5: "Penempatan yang sesuai, Bimbingan kinerja, Pengembangan kompetensi.",
    4: "Rotasi, Pengembangan kompetensi.",
    3: "Bimbingan kinerja, Konseling kinerja, Pengembangan kompetensi, Penempatan yang sesuai.",
    2: "Bimbingan kinerja, Pengembangan kompetensi, Penempatan yang sesuai.",
    1: "Diproses sesuai ketentuan peraturan perundangan.",
}

# Dashboard groupings used by the talent-pool report.
TOP_TALENT_BOXES = (9, 8, 7)
CORE_BOXES = (5, 4, 2)
AT_RISK_BOXES = (1, 3, 6)


def box_number(performance: float, potential: float) -> int:
    """Return the box number (1-9) for a score pair, 0 if off the grid."""
    row = potential_scale(potential) - 1
    col = performance_scale(performance) - 1
    if 0 <= row < len(BOX_GRID) and 0 <= col < len(BOX_GRID[row]):
        return BOX_GRID[row][col]
    return UNCLASSIFIED_BOX


def box_info(number: int) -> BoxInfo:
    return BoxInfo(
        box_number=number,
        category=CATEGORIES.get(number, UNCLASSIFIED_CATEGORY),
        recommendation=RECOMMENDATIONS.get(number, ""),
    )


def classify(performance: float, potential: float) -> BoxInfo:
    """Place a performance/potential score pair on the 9-box matrix."""
    return box_info(box_number(performance, potential))


def classify_employee(employee: Employee) -> BoxInfo:
    return classify(employee.performance, employee.potential)
