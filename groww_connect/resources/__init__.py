"""Resource groups exposed on the public clients."""

from groww_connect.resources.historical_data import HistoricalData
from groww_connect.resources.instruments import Instruments
from groww_connect.resources.live_data import LiveData
from groww_connect.resources.margin import Margin
from groww_connect.resources.orders import Orders
from groww_connect.resources.portfolio import Portfolio

__all__ = ["HistoricalData", "Instruments", "LiveData", "Margin", "Orders", "Portfolio"]
