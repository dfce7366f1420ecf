# API Route Constants

API_BASE = '/api'

# Reservation routes
RESERVATION_BASE = f'{API_BASE}/reservation'
RESERVATION_MY = f'{RESERVATION_BASE}/my'
RESERVATION_GET = f'{RESERVATION_BASE}/{{reservation_id}}'
RESERVATION_CANCEL = f'{RESERVATION_BASE}/{{reservation_id}}/cancel'
RESERVATION_STATUS = f'{RESERVATION_BASE}/{{reservation_id}}/status'
RESERVATION_CHAIR_CONFLICTS = f'{RESERVATION_BASE}/chair/{{chair_id}}/conflicts'
RESERVATION_SPACE_CONFLICTS = f'{RESERVATION_BASE}/space/{{space_id}}/conflicts'

# Utilization routes
UTILIZATION_BASE = f'{API_BASE}/utilization'
UTILIZATION_CHECK_IN = f'{UTILIZATION_BASE}/check-in'
UTILIZATION_WALK_IN = f'{UTILIZATION_BASE}/walk-in'
UTILIZATION_FORCE_CHECK_OUT = f'{UTILIZATION_BASE}/{{occupancy_id}}/force-check-out'
