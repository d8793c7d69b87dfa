# shelfkeeper

A console application for running a small lending library. It keeps books and
periodicals in a plain tab-separated data file. You can add and remove
publications, lend them to members and take them back. When a publication
comes back late, the program reports a penalty.

## Installing

```
pip install .
```

## Running

```
shelfkeeper LibRecs.txt
```

The program loads the records from the file you name and shows the main menu:

```
Seneca Library Application
 1- Add New Publication
 2- Remove Publication
 3- Checkout publication from library
 4- Return publication to library
 0- Exit
> 
```

If you run `shelfkeeper` with no file name, it offers two sample files,
`LibRecsSmall.txt` and `LibRecs.txt`. If a copy named with an `orig` prefix
exists (for example `origLibRecs.txt`), the program first restores the
chosen file from that copy. It then runs with "today" fixed at 2024/08/13.
At the end it prints the contents of the file.

### Searching

To search, you pick a publication type (Book or Publication) and enter part of
a title. The match is case-sensitive. The matches are shown in pages of 15,
sorted by title and then by checkout date. At the prompt you can enter:

- `N` to go to the next page,
- `P` to go to the previous page,
- a row number to choose a publication,
- `X` to leave.

Each of these letters may be given in upper or lower case.

### Lending and returning

- Checking out offers only publications that are on the shelf. The member
  number must be between 10000 and 99999.
- Returning offers only publications that are on loan. A loan lasts 15 days
  without penalty. After that the penalty is 50 cents per day, shown as
  `Please pay $X.XX penalty for being N days late!`.
- When a book is checked out or returned, its date becomes today's date.
  For a periodical the date stays as it was.

### Adding and removing

A new publication asks for:

- a shelf number of exactly four characters,
- a title,
- a date as `YYYY/MM/DD`,
- for books, an author.

It gets the next library reference after the last one in the file. The
library holds at most 333 publications.

### Leaving

When you leave after making changes, you have three choices:

- save them to the data file and leave,
- go back to the main menu,
- discard them. The program asks you to confirm, and then leaves either way.

## Data file format

Each line holds one record. The fields are separated by tabs:

```
P   <ref>   <shelf>   <title>   <member>   <YYYY/MM/DD>
B   <ref>   <shelf>   <title>   <member>   <YYYY/MM/DD>   <author>
```

- A member number of `0` means the publication is on the shelf.
- Dates must fall between the year 1500 and next year.
- Loading stops at the first record that cannot be read.
- Lines with an unknown type letter are reported on standard error and
  skipped.
- When saving, records whose reference is `0` are left out.

## Using the pieces from Python

```python
from shelfkeeper.date import Date
from shelfkeeper.menu import Menu

d = Date(2024, 6, 10)
print(d, bool(d))                   # 2024/06/10 True
print(Date(2024, 2, 30).status())   # Bad Day Value

m = Menu("Lunch Menu") << "Omelet" << "Tuna Sandwich"
print(len(m), m[0])                 # 2 Omelet
```

Other modules:

- `shelfkeeper.date` provides `set_test_date` and `clear_test_date`, which fix
  "today" and release it again.
- `shelfkeeper.publication` provides `Publication`.
- `shelfkeeper.book` provides `Book`.
- `shelfkeeper.selector` provides `PublicationSelector`.
- `shelfkeeper.app` provides `LibApp`, which can be given its own input and
  output streams.

`Publication.read` and `Book.read` raise `ValueError` for an invalid entry.

## What it does not do

- There is no register of members. Any number between 10000 and 99999 is
  accepted.
- There is no search by author or by shelf number.
- Penalties are only reported. They are not recorded.
- The data file is read once at start-up and written only when you choose to
  save. There is no locking against other programs that use the same file.

## Tests

```
pip install .[test]
pytest
```