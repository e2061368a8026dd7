"""Engine — one pure module per calculator."""

from calckit.engine.appliance_energy import (
    apply_appliance_profile,
    compare_annual_cost,
    compute_energy_cost,
    energy_saving_tips,
)
from calckit.engine.phone_cost import compute_phone_cost, efficiency_tier, rate_efficiency
from calckit.engine.rent_vs_buy import (
    compare_rent_vs_buy,
    compute_break_even_years,
    compute_buying_costs,
    compute_renting_costs,
    monthly_mortgage_payment,
    principal_paid,
    required_inputs_present,
)
from calckit.engine.renting_cost import compute_renting_cost
from calckit.engine.monthly_bills import (
    add_bill,
    clear_bills,
    monthly_equivalent,
    remove_bill,
    summarize_bills,
    update_bill,
)
from calckit.engine.charging_time import (
    charging_milestones,
    charging_minutes,
    compare_chargers,
    compatible_chargers,
    effective_watts,
    energy_added_wh,
    estimate_charging,
    speed_multiplier,
    speed_multipliers,
)

__all__ = [
    # Appliance energy
    "compute_energy_cost",
    "apply_appliance_profile",
    "energy_saving_tips",
    "compare_annual_cost",
    # Phone cost
    "compute_phone_cost",
    "efficiency_tier",
    "rate_efficiency",
    # Rent vs buy
    "compare_rent_vs_buy",
    "compute_buying_costs",
    "compute_renting_costs",
    "compute_break_even_years",
    "monthly_mortgage_payment",
    "principal_paid",
    "required_inputs_present",
    # Renting cost
    "compute_renting_cost",
    # Monthly bills
    "summarize_bills",
    "monthly_equivalent",
    "add_bill",
    "remove_bill",
    "update_bill",
    "clear_bills",
    # Charging time
    "estimate_charging",
    "charging_minutes",
    "charging_milestones",
    "compare_chargers",
    "compatible_chargers",
    "effective_watts",
    "energy_added_wh",
    "speed_multiplier",
    "speed_multipliers",
]
