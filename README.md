# harddots

A personalized dotfile manager for idempotent deployment across Unix-like
systems. Configuration files are kept in a Git repository, cloned into a local
cache directory, and hard-linked into place. Where an application needs a
system package, harddots checks whether it is installed and, if not, installs
it with the host's package manager (`brew install` on macOS,
`apt install -y` on Debian, `apk add` on Alpine), prefixed with `sudo` or
`doas` when one of them is on the `PATH`.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Configuration

harddots reads `harddots.toml` from the current directory:

```toml
git_repo = "git@example.com:me/dotfiles.git"
cache_dir = "~/.cache/harddots"   # optional, this is the default

[[applications]]
name = "starship"
target_path = "~/.config/starship.toml"
source_git_path = "starship/starship.toml"

[applications.packages]
macos = "starship"
debian = "starship"
alpine = "starship"
```

`git_repo` and `applications` are required. Each application needs `name`,
`target_path` (where the file should appear on this machine; a leading `~` is
expanded) and `source_git_path` (the file's path inside the repository), and a
`packages` table mapping an operating system (`macos`, `debian`, `alpine`) to
a package name. The `packages` table may be empty. Optional string fields
`version` and a `custom_install` table of strings are accepted and validated
but not otherwise used.

## Usage

Clone the dotfiles repository into the cache directory. If the cache directory
already holds a Git repository, nothing is cloned:

```
harddots init
```

Deploy every application, or a single one by name:

```
harddots deploy
harddots deploy starship
```

For each application, the package for the detected operating system is
installed if it is missing, then the file from the cache is hard-linked to the
target path. Parent directories are created and an existing file at the target
is replaced. Deployment stops with an error if the source file is not in the
cache or the named application does not exist.

See what would happen without changing anything:

```
harddots deploy --dry-run
```

Add an application to `harddots.toml`:

```
harddots add starship ~/.config/starship.toml starship/starship.toml \
    --macos-pkg starship --debian-pkg starship --alpine-pkg starship
```

Adding a name that already exists is refused. When no package option is
given, the new entry is written without a `packages` table; add one by hand
(it may be empty) before the file is loaded again.

harddots exits with status 1 on any error, including a missing or invalid
`harddots.toml`. Set the `HARDDOTS_LOG` environment variable (for example to
`DEBUG`) for more detailed logging; the default level is `INFO`.

## Library use

The pieces behind the commands can be used directly:

- `harddots.config.HarddotsConfig.load(path)` and `HarddotsConfig.from_dict(data)`
  read and validate a configuration, raising `harddots.errors.ConfigError`.
- `harddots.host.Host.detect()` reports the `OsType` and root command of the
  running machine.
- `harddots.package` builds and runs the package check and install commands.
- `harddots.git.clone_repo(url, cache_dir)` clones a repository, refusing when
  the directory already holds one with a different `origin`.
- `harddots.filesystem.create_hardlink(source, target)` places a file.

All failures are raised as `harddots.errors.HarddotsError` or a subclass.

## Limitations

harddots does not pull updates into an already cloned repository, does not
remove applications from management or unlink deployed files, has no status
report of managed applications, and does not generate shell completions.
Package installation is supported only on macOS, Debian and Alpine; on any
other system, deploying an application that names a package fails.