import sys

from dbflavor import detect_flavor, has_capability, supported_features

BASEDIR = "/opt/mysql/8.0.21"
VERSION = "8.0.21"


def main():
    basedir = sys.argv[1] if len(sys.argv) > 1 else BASEDIR
    version = sys.argv[2] if len(sys.argv) > 2 else VERSION

    flavor = detect_flavor(basedir)
    print("Flavor:", flavor)

    # choose the initialisation command the way a sandbox installer would
    if has_capability(flavor, "initialize", version):
        print("init: mysqld --initialize-insecure")
    elif has_capability(flavor, "installdb", version):
        print("init: scripts/mysql_install_db")
    else:
        print("init: not supported for", flavor, version)

    print("Features:", ", ".join(supported_features(flavor, version)))


if __name__ == "__main__":
    main()
