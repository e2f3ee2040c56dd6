"""The init, deploy and add subcommands of the harddots command line."""