# cloudlist

`cloudlist` prints a summary of what runs in a targeted Cloud Foundry space.
It shows three tables:

- **Applications**: name, routes (one per line), memory in MB,
  running/total instances and state. The heading shows the organisation's
  memory use against its instance memory quota.
- **Services**: instance name, service offering and plan. The heading shows
  the number of services used against the organisation's services limit.
- **Containers**: grouped by container group, or by container name when
  there is no group. Each row has the instance count, the last part of the
  image name, the creation timestamp (`--` for a group of more than one) and
  the status (`??` when the members of a group differ). The heading shows
  memory and public IP use against the space quota.

Messages are translated where a translation exists. English and Simplified
Chinese are included. The locale comes from the plugin context first, then
`LC_ALL`, then `LANG`. Any text without a translation falls back to English.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
cloudlist list
```

The command needs an API endpoint, a logged-in user (a UAA token) and a
targeted space in its `PluginContext`. If one of these is missing it prints
`FAILED` with the reason to standard error and exits with status 1. Any first
argument other than `list` does nothing.

## What it does not do

The `cloudlist` command starts with an empty `PluginContext`. There is no
login, no way to set an endpoint or target an org and space, and no stored
configuration, so run from the shell the command always reports that no API
endpoint is set. To list a real space, build a `PluginContext` (with its
`CFContext`, `Organization` and `Space`) in Python and pass it to
`cloudlist.plugin.start(ListPlugin(), ["list"], context)`.

## Library use

- `cloudlist.api`: `CCClient` and `ContainerClient`, built on `RestClient`
  (a `requests` session that sends GET requests and decodes JSON). They fetch
  space summaries, organisation usage, containers and container quotas.
  Server errors are raised as `CCError` or `ContainerError`; other failed
  responses as `requests.HTTPError`.
- `cloudlist.models`: dataclasses for the responses, built with `from_json`.
  `OrgUsage` also has `total_memory_used()`, `apps_count()` and
  `services_count()`.
- `cloudlist.commands`: `ListCommand` renders the three tables through a `UI`
  and raises `CommandError` on failure. `check_target` checks a `CFContext`.
  `formatted_gb` turns megabytes into a short gigabyte string, for example
  `formatted_gb(1792)` gives `"1.75 GB"`.
- `cloudlist.cli`: `ListPlugin`, `container_endpoint` (derives the container
  service endpoint from the API endpoint), `new_http_client`,
  `default_headers` and `main`.
- `cloudlist.plugin`: `PluginMetadata`, `Command`, `Namespace`, `Stage`,
  `VersionType`, `PluginContext`, `CFContext` and `start`.
- `cloudlist.ui`: `UI` and `Table` for aligned plain-text tables, plus
  `colorize`, `decolorize` and `command_color`. Colours are stripped unless
  `UI.color` is set.
- `cloudlist.i18n`: `init` picks a `Translator` for a locale; `translate`
  uses the one installed with `set_translator`.
- `cloudlist.resources`: the bundled translation files, through `asset`,
  `asset_info`, `asset_names`, `asset_dir`, `restore_asset` and
  `restore_assets`.
- `cloudlist.fakes`: `FakeCCClient` and `FakeContainerClient` record calls
  and give canned results or errors in tests.
- `cloudlist.matchers`: `contain_substrings` checks that groups of substrings
  each appear together on one line of output, with colours ignored.

## Example plugins

`cloudlist.examples` holds small plugins built on `cloudlist.plugin`:

- `HelloWorldPlugin`: a command with an alias that prints a greeting.
- `NamespaceDemo`: commands grouped under a namespace.
- `StageDemo`: beta, deprecated and experimental stages.
- `AutoCompleteDelegationSample`: answers `SendCompletion` requests itself,
  listing sub-commands or the roles for `set-role`.
- `PrintContext`: prints the plugin context as a table.

Run any of them with `cloudlist.plugin.start(plugin, args, context)`.