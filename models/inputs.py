from dataclasses import dataclass

from config.defaults import DEFAULT_INPUTS


@dataclass(frozen=True)
class ModelInputs:
    cartons_delivered: float = DEFAULT_INPUTS["cartons_delivered"]
    online_units: float = DEFAULT_INPUTS["online_units"]
    hourly_rate: float = DEFAULT_INPUTS["hourly_rate"]
    stores: int = DEFAULT_INPUTS["stores"]
    weeks_per_year: float = DEFAULT_INPUTS["weeks_per_year"]

    @property
    def network_weeks(self) -> float:
        """Store-weeks in a year across the network."""
        return self.stores * self.weeks_per_year
