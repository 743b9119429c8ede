"""Colombian holiday catalog (Law 51 of 1983, "Ley de Puentes")."""

from typing import Final

from festivos.core.models import (
    HolidayCategory,
    HolidayDefinition,
    easter_holiday,
    fixed_holiday,
)

FIXED_CIVIL = HolidayCategory.FIXED_CIVIL
FIXED_RELIGIOUS = HolidayCategory.FIXED_RELIGIOUS
EASTER_BASED_RELIGIOUS = HolidayCategory.EASTER_BASED_RELIGIOUS
TRANSFERABLE_CIVIL = HolidayCategory.TRANSFERABLE_CIVIL
TRANSFERABLE_RELIGIOUS = HolidayCategory.TRANSFERABLE_RELIGIOUS


# === Fixed: never moved ===
FIXED_HOLIDAYS: Final[tuple[HolidayDefinition, ...]] = (
    fixed_holiday("Año Nuevo", 1, 1, FIXED_CIVIL),
    fixed_holiday("Día del Trabajo", 5, 1, FIXED_CIVIL),
    fixed_holiday("Día de la Independencia", 7, 20, FIXED_CIVIL),
    fixed_holiday("Batalla de Boyacá", 8, 7, FIXED_CIVIL),
    fixed_holiday("Inmaculada Concepción", 12, 8, FIXED_RELIGIOUS),
    fixed_holiday("Navidad", 12, 25, FIXED_RELIGIOUS),
)

# === Easter-based: Semana Santa stays put, the rest move to Monday ===
EASTER_BASED_HOLIDAYS: Final[tuple[HolidayDefinition, ...]] = (
    easter_holiday("Jueves Santo", -3, EASTER_BASED_RELIGIOUS),
    easter_holiday("Viernes Santo", -2, EASTER_BASED_RELIGIOUS),
    easter_holiday("Ascensión del Señor", 39, TRANSFERABLE_RELIGIOUS),
    easter_holiday("Corpus Christi", 60, TRANSFERABLE_RELIGIOUS),
    easter_holiday("Sagrado Corazón", 68, TRANSFERABLE_RELIGIOUS),
)

# === Transferable fixed dates: moved to the following Monday ===
TRANSFERABLE_HOLIDAYS: Final[tuple[HolidayDefinition, ...]] = (
    fixed_holiday("Día de los Reyes Magos", 1, 6, TRANSFERABLE_RELIGIOUS),
    fixed_holiday("Día de San José", 3, 19, TRANSFERABLE_RELIGIOUS),
    fixed_holiday("San Pedro y San Pablo", 6, 29, TRANSFERABLE_RELIGIOUS),
    fixed_holiday("Asunción de la Virgen", 8, 15, TRANSFERABLE_RELIGIOUS),
    fixed_holiday("Día de la Diversidad Étnica y Cultural", 10, 12, TRANSFERABLE_CIVIL),
    fixed_holiday("Día de Todos los Santos", 11, 1, TRANSFERABLE_RELIGIOUS),
    fixed_holiday("Independencia de Cartagena", 11, 11, TRANSFERABLE_CIVIL),
)

COLOMBIAN_HOLIDAYS: Final[tuple[HolidayDefinition, ...]] = (
    FIXED_HOLIDAYS + EASTER_BASED_HOLIDAYS + TRANSFERABLE_HOLIDAYS
)
