"""Search categories and item conditions accepted by ItemSearch"""

from enum import Enum

# Valid names that can be used as a SearchIndex
VALID_SEARCH_NAMES = (
    'All', 'Apparel', 'Appliances', 'Automotive', 'Baby', 'Beauty', 'Blended',
    'Books', 'Classical', 'DVD', 'Electronics', 'Grocery', 'HealthPersonalCare',
    'HomeGarden', 'HomeImprovement', 'Jewelry', 'KindleStore', 'Kitchen',
    'Lighting', 'Marketplace', 'MP3Downloads', 'Music', 'MusicTracks',
    'MusicalInstruments', 'OfficeProducts', 'OutdoorLiving', 'Outlet',
    'PetSupplies', 'PCHardware', 'Shoes', 'Software', 'SoftwareVideoGames',
    'SportingGoods', 'Tools', 'Toys', 'VHS', 'Video', 'VideoGames', 'Watches',
)


class Condition(str, Enum):
    NEW = "New"
    USED = "Used"
    COLLECTIBLE = "Collectible"
    REFURBISHED = "Refurbished"
    ALL = "All"
