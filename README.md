# dddscaffold

Building blocks for domain-driven applications around users and tenants,
with a small scaffolding command-line tool.

## What it provides

- **User values** (`dddscaffold.user_values`): `UserID`, `UserName`, `Email`,
  `HashedPassword`, `UserStatus` and `UserGender`. `UserName` and `Email`
  trim (and, for e-mail, lower-case) their input and raise `ValidationError`
  when it is invalid. The module also defines `BusinessError` (with a `code`
  and a `message`) and `AggregateNotFoundError`.
- **Domain events** (`dddscaffold.user_events`, `dddscaffold.tenant_events`):
  `DomainEvent` and its user and tenant events, such as
  `UserRegisteredEvent`, `UserLoggedInEvent`, `UserLockedEvent`,
  `TenantCreatedEvent` and `TenantMemberRoleChangedEvent`. Each carries a
  `metadata` dict with `event_type` and `aggregate_type`; security-related
  events also set `security_event`.
- **Tenants** (`dddscaffold.tenant_values`, `dddscaffold.tenant_entity`): the
  `Tenant` aggregate, created with `new_tenant`, and its values `TenantID`,
  `TenantCode`, `TenantStatus`, `TenantRole`, `TenantConfig` (see
  `default_tenant_config`) and `TenantMember`. A tenant records the events it
  raises; read them with `uncommitted_events()`.
- **Tenant service** (`dddscaffold.tenant_service`): `TenantService` creates
  tenants, adds and removes members, changes roles, transfers ownership and
  deactivates tenants, raising `BusinessError` when a rule is broken and
  `AggregateNotFoundError` when the tenant does not exist.
- **Repository contracts and DTOs** (`dddscaffold.user_repository`,
  `dddscaffold.tenant_repository`): the `UserRepository`, `UserReadModel`,
  `TenantRepository` and `TenantReadModel` protocols, search criteria and
  DTOs whose `to_dict()` gives a JSON-ready dict that leaves out empty
  optional fields.
- **Pagination** (`dddscaffold.pagination`): `new_pagination` clamps the page
  to at least 1 and the page size to 1–100 (20 when not positive);
  `Pagination.offset()` and `limit()`; `paginate` builds a `PaginatedResult`
  and counts its pages.
- **Event handling** (`dddscaffold.user_event_handler`): `UserEventHandler`
  logs the user events it knows and ignores others; `InMemoryEventPublisher`
  publishes events by logging them.
- **Domain modules** (`dddscaffold.modules`): `ModuleRegistry`, or the
  process-wide `register`, `get_modules` and `initialize_all`, which
  initialise every registered module and attach start and stop hooks for
  lifecycle modules to the container.

## Installation

```
pip install .
```

## Example

```python
from dddscaffold.pagination import new_pagination
from dddscaffold.tenant_entity import new_tenant
from dddscaffold.tenant_values import TenantStatus
from dddscaffold.user_values import UserID

tenant = new_tenant("acme", "Acme Corp", UserID(42))
assert tenant.code.value == "ACME"
tenant.suspend("billing overdue")
assert tenant.status is TenantStatus.SUSPENDED

page = new_pagination(3, 500)
assert (page.page_size, page.offset()) == (100, 200)
```

## Command line

```
dddscaffold --help
dddscaffold --version
dddscaffold init myproject --template clean-architecture
dddscaffold generate entity Order --fields "id:int,total:float"
dddscaffold migrate up
dddscaffold docs swagger
dddscaffold clean ./build --dry-run
dddscaffold version
```

`generate` (aliases `gen` and `g`) has the subcommands `entity`,
`repository`, `service`, `handler` and `dto`. `migrate` has `up`, `down` and
`create NAME`; `docs` has `swagger`. The global options are `-c/--config`,
`-v/--verbose` and `-n/--dry-run`.

## What it does not do

- There are no repository or read-model implementations and no database
  storage: the package only defines the contracts, which you implement.
- There is no HTTP server or API.
- The command-line tool writes no files. `init`, the `generate` subcommands
  and `clean` print what they were asked to do; `migrate` and `docs` print a
  message and run nothing. There is no `generate dao` command.