from lookup import run_lookup
import sys

if __name__ == '__main__':
    sys.exit(run_lookup(sys.argv[1:]))
