import sys

from mimeparse.app import MimeParse

def mimeparse():
    sys.exit(MimeParse()())
