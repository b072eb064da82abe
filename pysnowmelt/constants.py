"""
Physical and empirical constants for the snowmelt model.

Units follow the daily model convention: energy in MJ, time in days,
temperature in °C, pressure in kPa.
"""

# Temperature
TFRZ = 273.2  # Freezing point [K]
T_SNOW = 0.0  # Melting snow surface temperature [°C]

# Vapor pressure (Tetens over water)
E_SAT_0 = 0.611  # Saturation vapor pressure at 0°C [kPa]
TETENS_A = 17.3
TETENS_B = 237.3  # [°C]

# Densities [kg/m³]
RHO_WATER = 1000.0

# Latent heats [MJ/kg]
LF_FUSION = 0.334  # Latent heat of fusion
LV_VAPORIZATION = 2.47  # Latent heat of vaporization

# Heat capacities [MJ/(kg·K)]
CP_AIR = 0.001005
CP_WATER = 0.004187

# Radiation
STEFAN_BOLTZMANN = 4.9e-9  # [MJ/(m²·day·K⁴)]

# Shortwave attenuation (Croley 1989 cloud, Mahat & Tarboton 2012 forest)
CLOUD_TRANSMISSION_BASE = 0.355
CLOUD_TRANSMISSION_SLOPE = 0.68
FOREST_EXTINCTION = 3.91

# Turbulence
VON_KARMAN = 0.4
GRAVITY = 9.81  # [m/s²]
RICHARDSON_CRITICAL = 0.2
FOREST_WIND_REDUCTION = 0.8

# Gas constant for dry air [kJ/(kg·K)]
R_AIR = 0.288

# Ratio of molecular weights, water vapor / dry air
EPSILON = 0.622

SECONDS_PER_DAY = 86400.0
