"""
Insights Configuration
Thresholds and limits for inter-personal distance (IPD) analytics
"""

# Proxemic Zones based on Edward T. Hall's research
# Distances are in centimeters, lower bound inclusive, upper bound exclusive
PROXEMIC_ZONES = {
    'intimate': (0, 45),               # 0-45cm: intimate distance
    'personal': (45, 120),             # 45cm-1.2m: personal distance
    'social': (120, 360),              # 1.2-3.6m: social distance
    'public': (360, float('inf')),     # 3.6m and beyond: public distance
}

# Insight Analysis Parameters
INSIGHTS_ANALYSIS = {
    'proxemic_zones': PROXEMIC_ZONES,
    'neighbor_limit': 10,                    # Most similar players returned
    'cancellation_check_interval': 1024,     # Samples between cancellation checks
}

# Tighter zones for dense indoor scenes
CLASSROOM_INSIGHTS = {
    **INSIGHTS_ANALYSIS,
    'proxemic_zones': {
        'intimate': (0, 30),
        'personal': (30, 100),
        'social': (100, 250),
        'public': (250, float('inf')),
    },
    'neighbor_limit': 5,
}

