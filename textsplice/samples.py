"""Built-in demonstration text used when no input is supplied."""

from __future__ import annotations

SAMPLE_TEXT = (
    "Велика вежа стояла на вершині гори, і вид з неї був просто неймовірний! "
    "Як далеко тягнеться цей туман, що оповив все навколо? "
    "Ранкове сонце теплом обіймало землю, чи може бути щось прекрасніше? "
    "Вітер дув настільки легко, що здавалось, ніби він лагідно торкався "
    "кожного листочка. "
    "Десь далеко чулося тихе дзюрчання струмка, а чи могли туристи оминути це "
    "місце? "
    "Вони зупинялися тут, щоб відчути гармонію природи. "
    "Кожен знаходив тут свій спокій."
)
