"""Fixed values shared across the orrery package."""

# Reference date that the catalog's mean longitudes are measured from
EPOCH = "1/1/2000"

# Days in an Earth year, as used to convert orbital periods to years
DAYS_PER_YEAR = 365.24

# Kilometers in one astronomical unit
KM_PER_AU = 149597870.7
