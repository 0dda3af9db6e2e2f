"""
Built-in inspection checklist template.

Used for organizations that have never saved a checklist of their own and
for the super-admin area, which has no organization checklist.
"""

import copy

ICON_NAMES = frozenset(
    {
        "Cog",
        "Droplets",
        "Car",
        "Armchair",
        "Circle",
        "Lightbulb",
        "Fan",
        "Gauge",
        "BatteryCharging",
        "CarFront",
        "Sofa",
        "Siren",
        "Thermometer",
        "Speaker",
        "Snowflake",
        "Disc",
        "Fuel",
        "SprayCan",
        "SlidersHorizontal",
        "Wrench",
        "AirVent",
        "Power",
        "Settings2",
        "Radio",
        "CircuitBoard",
        "Heater",
        "ParkingCircle",
        "Tires&Wheels",
        "ElectricalSystem",
        "Driver",
        "PrimeMover",
        "Trailer",
    }
)

DEFAULT_ICON = "Cog"


def _item(item_id: str, name: str, description: str) -> dict[str, str]:
    return {"id": item_id, "name": name, "description": description}


DEFAULT_CHECKLIST: list[dict] = [
    {
        "id": "driver",
        "name": "Driver",
        "icon": "Driver",
        "items": [
            _item(
                "driver_license_insurance",
                "Vehicle License & Insurance",
                "Are the vehicle license(s) and insurance certificate valid?",
            ),
            _item(
                "driver_valid_license",
                "Driver's License",
                "Does the driver have a valid driver's license?",
            ),
            _item(
                "driver_induction_card",
                "Induction Card",
                "Has the driver undergone DDT& does he possess a valid induction card?",
            ),
            _item(
                "driver_ppe",
                "Basic PPE",
                "Does the driver have his basic PPE (helmet, safety boots, and overall)?",
            ),
        ],
    },
    {
        "id": "prime_mover",
        "name": "Prime Mover/Tractor Head",
        "icon": "PrimeMover",
        "items": [
            _item("pm_oil_fuel_leaks", "Oil and Fuel Leaks", "Is the truck free from oil and fuel leaks?"),
            _item("pm_windscreen", "Windscreen", "Is it clear of unnecessary stickers and free of cracks?"),
            _item(
                "pm_lights_wipers",
                "Lights & Wipers",
                "Are the head lights, trafficators and wiper in good functional condition?",
            ),
            _item("pm_horn_alarm", "Horn and Reverse Alarm", "Are they functional?"),
            _item(
                "pm_mirrors",
                "Driving Mirrors",
                "Are all mirrors firmly fixed and well positioned for good visibility?",
            ),
            _item(
                "pm_tires",
                "Tires Condition",
                "Are all tires in good condition and well inflated? (360 degrees inspection)",
            ),
            _item(
                "pm_studs_nuts",
                "Wheel Studs & Nuts",
                "The wheels have all the required studs and nuts (no missing nuts)",
            ),
            _item(
                "pm_cabin",
                "Cabin Condition",
                "The cabin, doors, seats, 3-point belts, floor plate, steps and other parts intact?",
            ),
            _item(
                "pm_engine_start",
                "Engine Start",
                "The engine starts using the starter/battery? (no pushing, non-usage of wires)",
            ),
            _item("pm_hand_brake", "Hand Brake/Park Brake", "Is the hand brake/park brake functional?"),
            _item(
                "pm_aux_braking",
                "Auxiliary Braking System",
                "Is the vehicle equipped with an auxiliary braking system (bevel brake, coolant, engine brake)",
            ),
            _item(
                "pm_extinguisher",
                "Fire Extinguisher & Safety Cone",
                "Is the vehicle with one 9kg extinguisher and 2 caution sign/Safety Cone",
            ),
            _item("pm_jack", "Functional Jack", "Does the vehicle have a functional jack?"),
            _item(
                "pm_wheel_chokes",
                "Wheel Chokes",
                "Does the vehicle have 2 standard wheel chokes with handles?",
            ),
            _item(
                "pm_cigarette_lighter",
                "Cigarette Lighter",
                "The cigarette lighter is removed from the cabin",
            ),
            _item("pm_cabin_items", "Cabin Free of Items", "Is the cabin free of any moving item?"),
            _item("pm_battery_secured", "Battery Secure", "Battery is properly secured?"),
            _item(
                "pm_battery_terminals",
                "Battery Terminals & Cables",
                "Are the battery terminals and electrical cables well insulated?",
            ),
            _item(
                "pm_exhaust",
                "Exhaust Condition",
                "Is exhaust intact, silent, free of leaks and not smoking?",
            ),
            _item(
                "pm_fuel_pipes",
                "Fuel/CNG Pipes & Air Tanks",
                "Fuel, CNG linking pipes and air tanks are properly locked.",
            ),
        ],
    },
    {
        "id": "trailer_container",
        "name": "Trailer/Container",
        "icon": "Trailer",
        "items": [
            _item(
                "tc_brakes",
                "Trailer Brakes",
                "Must operate correctly when connected to tractor. (check air hose of trailer)",
            ),
            _item("tc_axles", "Axles", "The trailer must have a minimum of 2 axles."),
            _item(
                "tc_kingpin",
                "Kingpin Play",
                "The kingpin play in relation to fifth wheel checked (check greasy turntable)",
            ),
            _item(
                "tc_landing_legs",
                "Landing Legs",
                "The trailer landing legs are straight and adjustable not welded (landing sit is well secured)",
            ),
            _item("tc_twistlock", "Twistlock", "Check the twistlock if well secured"),
            _item(
                "tc_loading_bed",
                "Loading Bed Condition",
                "Is the loading bed smooth, free from obstructions and gaping holes?",
            ),
            _item(
                "tc_hooks",
                "Loading Bed Hooks",
                "Are the hooks of the trailer loading bed (SIDED BODY) intact?",
            ),
            _item(
                "tc_chassis",
                "Trailer Body/Chassis",
                "Is the trailer body (chassis) intact and there is no visible cracks and has worn parts?",
            ),
            _item(
                "tc_trailer_tires",
                "Trailer Tires",
                "All trailer tyres good in condition and well inflated? (360 degrees inspection) "
                "MINIMUM DEPTH OF 2.5MM",
            ),
            _item("tc_spare_wheel", "Spare Wheel", "Does the vehicle have a good inflated spare wheel?"),
            _item(
                "tc_tarpaulin_harness",
                "Tarpaulin Harnessing Devices",
                "Are the tarpaulin harnessing devices in position? Are they appropriate and adequate?",
            ),
            _item("tc_wheel_nuts", "Wheel Nuts/Studs", "wheel nuts/studs are complete and fastened. Hub cover"),
            _item("tc_tarpaulin", "Tarpaulin Adequacy", "Is there a good and adequate tarpaulin?"),
            _item(
                "tc_reflectors",
                "Rear Safety Reflectors",
                "Is rear safety reflectors fitted to the trailer? And conspicuity tape fitted.",
            ),
            _item("tc_twist_lock_intact", "Twist Lock Intactness", "Is the twist lock well intact"),
        ],
    },
]


def default_checklist() -> list[dict]:
    """Fresh copy of the default template, safe for callers to mutate."""
    return copy.deepcopy(DEFAULT_CHECKLIST)
