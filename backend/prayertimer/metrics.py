# prayertimer/metrics.py

from prometheus_client import Counter

# Define Prometheus metrics

# Timer Metrics
TIMER_RESOLUTIONS_TOTAL = Counter('prayertimer_timer_resolutions_total', 'Total prayer timer resolutions', ['timer_type'])
TIMER_UNAVAILABLE_TOTAL = Counter('prayertimer_timer_unavailable_total', 'Total requests with no prayer data for the date')
