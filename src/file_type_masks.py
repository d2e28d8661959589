"""Mode bit constants, named after the C macros of the same (similar) name.

Defined here rather than taken from ``stat`` so the values are the same on
every platform, including ``S_IFWHT`` which most platforms don't export.
"""

from typing import Final


# File type codes, already shifted into bits 12-15
S_IFIFO  : Final = 0o00010000   # pipe
S_IFCHR  : Final = 0o00020000   # character device
S_IFDIR  : Final = 0o00040000   # directory
S_IFBLK  : Final = 0o00060000   # block device
S_IFREG  : Final = 0o00100000   # regular
S_IFLNK  : Final = 0o00120000   # sym-link
S_IFSOCK : Final = 0o00140000   # Socket
S_IFWHT  : Final = 0o00160000   # whiteout (union file systems)

S_IFMT   : Final = 0o00170000   # file type mask
TYPE_SHIFT : Final = 12

# Special bits
S_ISUID  : Final = 0o00004000   # set-user-ID
S_ISGID  : Final = 0o00002000   # set-group-ID
S_ISVTX  : Final = 0o00001000   # sticky

# Permission bits
S_IRALL  : Final = 0o00000444   # Readable by all
S_IWALL  : Final = 0o00000222   # Writable by all
S_IXALL  : Final = 0o00000111   # Executable by all (means "listable" for a directory!)
