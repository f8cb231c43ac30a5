"""Monitor type tags and heartbeat status enums."""

from __future__ import annotations

from enum import StrEnum


class MonitorKind(StrEnum):
    """Monitor types known to the scheduler."""

    HTTP = "http"
    KEYWORD = "keyword"
    JSON_QUERY = "json-query"
    GRPC_KEYWORD = "grpc-keyword"
    PORT = "port"
    PING = "ping"
    DNS = "dns"
    SMTP = "smtp"
    SNMP = "snmp"
    MQTT = "mqtt"
    RADIUS = "radius"
    DOMAIN_EXPIRY = "domain-expiry"
    PUSH = "push"
    DOCKER = "docker"


class HeartbeatStatus(StrEnum):
    """Outcome of a single monitor tick."""

    UP = "up"
    DOWN = "down"
    PENDING = "pending"


# Monitor types whose target field carries a hostname or URL, keyed to the
# name of that field. Types missing here (push, docker) have no domain.
DOMAIN_TARGET_FIELDS: dict[str, str] = {
    MonitorKind.HTTP: "url",
    MonitorKind.KEYWORD: "url",
    MonitorKind.JSON_QUERY: "url",
    MonitorKind.GRPC_KEYWORD: "grpc_url",
    MonitorKind.PORT: "hostname",
    MonitorKind.PING: "hostname",
    MonitorKind.DNS: "hostname",
    MonitorKind.SMTP: "hostname",
    MonitorKind.SNMP: "hostname",
    MonitorKind.MQTT: "hostname",
    MonitorKind.RADIUS: "hostname",
    MonitorKind.DOMAIN_EXPIRY: "hostname",
}
