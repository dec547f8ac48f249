"""Managed database tools."""

from typing import Annotated, Literal

from mcp.types import CallToolResult
from pydantic import BaseModel, Field

from ..formatters import format_response, success_response
from .common import (
    Format,
    PageNumber,
    PerPage,
    do_tool,
    dump_models,
    get_client,
    page_params,
)

DatabaseId = Annotated[str, Field(description="Database cluster UUID")]
Engine = Literal["pg", "mysql", "redis", "valkey", "mongodb", "kafka", "opensearch"]
MysqlAuthPlugin = Annotated[
    Literal["mysql_native_password", "caching_sha2_password"] | None,
    Field(description="MySQL authentication plugin (MySQL clusters only)"),
]


class TrustedSource(BaseModel):
    """A trusted-source rule restricting inbound connections."""

    type: Literal["droplet", "k8s", "ip_addr", "tag", "app"]
    value: str = Field(description="Droplet ID, cluster UUID, IP/CIDR, tag or app ID")


@do_tool
async def digitalocean_list_databases(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List managed database clusters."""
    result = await get_client().list_databases(**page_params(per_page, page))
    return format_response(result, format, "databases")


@do_tool
async def digitalocean_get_database(database_id: DatabaseId, format: Format = "json") -> CallToolResult:
    """Get details of a database cluster, including connection info."""
    database = await get_client().get_database(database_id)
    return format_response(database, format, "databases")


@do_tool
async def digitalocean_create_database(
    name: Annotated[str, Field(description="Cluster name")],
    engine: Annotated[Engine, Field(description="Database engine")],
    region: Annotated[str, Field(description="Region slug")],
    size: Annotated[str, Field(description="Node size slug, e.g. db-s-1vcpu-1gb")],
    num_nodes: Annotated[int, Field(ge=1, le=3, description="Number of nodes")] = 1,
    version: Annotated[str | None, Field(description="Engine version")] = None,
    private_network_uuid: Annotated[str | None, Field(description="VPC UUID")] = None,
    tags: list[str] | None = None,
    project_id: str | None = None,
) -> CallToolResult:
    """Create a managed database cluster."""
    database = await get_client().create_database(
        {
            "name": name,
            "engine": engine,
            "region": region,
            "size": size,
            "num_nodes": num_nodes,
            "version": version,
            "private_network_uuid": private_network_uuid,
            "tags": tags,
            "project_id": project_id,
        }
    )
    return success_response("Database cluster creation initiated", database=database)


@do_tool
async def digitalocean_delete_database(database_id: DatabaseId) -> CallToolResult:
    """Delete a database cluster."""
    await get_client().delete_database(database_id)
    return success_response(f"Database cluster {database_id} deleted")


@do_tool
async def digitalocean_resize_database(
    database_id: DatabaseId,
    size: Annotated[str, Field(description="New node size slug")],
    num_nodes: Annotated[int, Field(ge=1, le=3, description="Number of nodes")],
) -> CallToolResult:
    """Resize a database cluster."""
    await get_client().resize_database(database_id, size, num_nodes)
    return success_response(f"Resize to {size} x{num_nodes} initiated")


@do_tool
async def digitalocean_migrate_database(
    database_id: DatabaseId,
    region: Annotated[str, Field(description="Target region slug")],
) -> CallToolResult:
    """Migrate a database cluster to another region."""
    await get_client().migrate_database(database_id, region)
    return success_response(f"Migration to {region} initiated")


@do_tool
async def digitalocean_list_database_backups(
    database_id: DatabaseId, format: Format = "json"
) -> CallToolResult:
    """List backups of a database cluster."""
    backups = await get_client().list_database_backups(database_id)
    return format_response(backups, format, "backups")


@do_tool
async def digitalocean_get_database_ca(database_id: DatabaseId) -> CallToolResult:
    """Get the CA certificate used to verify TLS connections to a cluster."""
    certificate = await get_client().get_database_ca(database_id)
    return format_response({"certificate": certificate})


@do_tool
async def digitalocean_list_database_replicas(
    database_id: DatabaseId, format: Format = "json"
) -> CallToolResult:
    """List read-only replicas of a cluster."""
    replicas = await get_client().list_database_replicas(database_id)
    return format_response(replicas, format, "replicas")


@do_tool
async def digitalocean_create_database_replica(
    database_id: DatabaseId,
    name: Annotated[str, Field(description="Replica name")],
    size: Annotated[str | None, Field(description="Node size slug")] = None,
    region: Annotated[str | None, Field(description="Region slug")] = None,
    tags: list[str] | None = None,
) -> CallToolResult:
    """Create a read-only replica."""
    replica = await get_client().create_database_replica(database_id, name, size, region, tags)
    return success_response("Replica creation initiated", replica=replica)


@do_tool
async def digitalocean_delete_database_replica(
    database_id: DatabaseId,
    replica_name: Annotated[str, Field(description="Replica name")],
) -> CallToolResult:
    """Delete a read-only replica."""
    await get_client().delete_database_replica(database_id, replica_name)
    return success_response(f"Replica {replica_name} deleted")


@do_tool
async def digitalocean_promote_database_replica(
    database_id: DatabaseId,
    replica_name: Annotated[str, Field(description="Replica name")],
) -> CallToolResult:
    """Promote a replica to a standalone primary cluster."""
    await get_client().promote_database_replica(database_id, replica_name)
    return success_response(f"Replica {replica_name} promoted to primary")


@do_tool
async def digitalocean_list_database_users(
    database_id: DatabaseId, format: Format = "json"
) -> CallToolResult:
    """List users of a database cluster."""
    users = await get_client().list_database_users(database_id)
    return format_response(users, format, "users")


@do_tool
async def digitalocean_create_database_user(
    database_id: DatabaseId,
    name: Annotated[str, Field(description="Username")],
    mysql_auth_plugin: MysqlAuthPlugin = None,
) -> CallToolResult:
    """Create a database user. The response includes the generated password."""
    user = await get_client().create_database_user(database_id, name, mysql_auth_plugin)
    return success_response(f"User {name} created", user=user)


@do_tool
async def digitalocean_delete_database_user(
    database_id: DatabaseId,
    username: Annotated[str, Field(description="Username")],
) -> CallToolResult:
    """Delete a database user."""
    await get_client().delete_database_user(database_id, username)
    return success_response(f"User {username} deleted")


@do_tool
async def digitalocean_reset_database_user_auth(
    database_id: DatabaseId,
    username: Annotated[str, Field(description="Username")],
    mysql_auth_plugin: MysqlAuthPlugin = None,
) -> CallToolResult:
    """Reset a user's password (and, for MySQL, its auth plugin)."""
    user = await get_client().reset_database_user_auth(database_id, username, mysql_auth_plugin)
    return success_response(f"Credentials for {username} reset", user=user)


@do_tool
async def digitalocean_list_database_dbs(
    database_id: DatabaseId, format: Format = "json"
) -> CallToolResult:
    """List databases inside a cluster."""
    dbs = await get_client().list_database_dbs(database_id)
    return format_response(dbs, format, "dbs")


@do_tool
async def digitalocean_create_database_db(
    database_id: DatabaseId,
    name: Annotated[str, Field(description="Database name")],
) -> CallToolResult:
    """Create a database inside a cluster."""
    db = await get_client().create_database_db(database_id, name)
    return success_response(f"Database {name} created", db=db)


@do_tool
async def digitalocean_delete_database_db(
    database_id: DatabaseId,
    db_name: Annotated[str, Field(description="Database name")],
) -> CallToolResult:
    """Delete a database inside a cluster."""
    await get_client().delete_database_db(database_id, db_name)
    return success_response(f"Database {db_name} deleted")


@do_tool
async def digitalocean_list_database_pools(
    database_id: DatabaseId, format: Format = "json"
) -> CallToolResult:
    """List connection pools (PostgreSQL only)."""
    pools = await get_client().list_database_pools(database_id)
    return format_response(pools, format, "pools")


@do_tool
async def digitalocean_create_database_pool(
    database_id: DatabaseId,
    name: Annotated[str, Field(description="Pool name")],
    mode: Annotated[Literal["session", "transaction", "statement"], Field(description="Pool mode")],
    size: Annotated[int, Field(ge=1, description="Number of backend connections")],
    db: Annotated[str, Field(description="Database the pool connects to")],
    user: Annotated[str, Field(description="User the pool connects as")],
) -> CallToolResult:
    """Create a PgBouncer connection pool."""
    pool = await get_client().create_database_pool(database_id, name, mode, size, db, user)
    return success_response(f"Connection pool {name} created", pool=pool)


@do_tool
async def digitalocean_delete_database_pool(
    database_id: DatabaseId,
    pool_name: Annotated[str, Field(description="Pool name")],
) -> CallToolResult:
    """Delete a connection pool."""
    await get_client().delete_database_pool(database_id, pool_name)
    return success_response(f"Connection pool {pool_name} deleted")


@do_tool
async def digitalocean_list_database_firewall_rules(
    database_id: DatabaseId, format: Format = "json"
) -> CallToolResult:
    """List the trusted sources of a cluster."""
    rules = await get_client().list_database_firewall_rules(database_id)
    return format_response(rules, format, "rules")


@do_tool
async def digitalocean_update_database_firewall_rules(
    database_id: DatabaseId,
    rules: Annotated[
        list[TrustedSource],
        Field(description="Complete replacement set of trusted sources"),
    ],
) -> CallToolResult:
    """Replace the trusted sources of a cluster. An empty list allows all sources."""
    await get_client().update_database_firewall_rules(database_id, dump_models(rules))
    return success_response(f"Trusted sources updated ({len(rules)} rule(s))")


TOOLS = [
    digitalocean_list_databases,
    digitalocean_get_database,
    digitalocean_create_database,
    digitalocean_delete_database,
    digitalocean_resize_database,
    digitalocean_migrate_database,
    digitalocean_list_database_backups,
    digitalocean_get_database_ca,
    digitalocean_list_database_replicas,
    digitalocean_create_database_replica,
    digitalocean_delete_database_replica,
    digitalocean_promote_database_replica,
    digitalocean_list_database_users,
    digitalocean_create_database_user,
    digitalocean_delete_database_user,
    digitalocean_reset_database_user_auth,
    digitalocean_list_database_dbs,
    digitalocean_create_database_db,
    digitalocean_delete_database_db,
    digitalocean_list_database_pools,
    digitalocean_create_database_pool,
    digitalocean_delete_database_pool,
    digitalocean_list_database_firewall_rules,
    digitalocean_update_database_firewall_rules,
]
