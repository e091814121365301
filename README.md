# trainstation

A small console application for running a network of railway stations. It
keeps stations and their arrival and departure boards. It gives each train a
platform at both ends, so that no two trains use the same track at overlapping
times. Administrators build trains out of wagons. Tickets are sold and written
to text files, and discount cards are issued as text files.

## Installing

    pip install .

## Running

    trainstation [--admins FILE] [--card-list FILE]

The program reads one command per line from standard input and prints the
result of each one. When a command fails, the error message is printed and
the program reads the next command. `exit` ends the session and writes the
list of issued discount card IDs to the card list file.

Options:

- `--admins FILE`: the administrators file. The default is `Admins.txt` in the
  working directory. It holds a user name on one line and the password on the
  next, repeated for every account. If the file cannot be read, `File error!`
  is printed and the session starts with no administrators.
- `--card-list FILE`: the file listing issued card IDs. The default is
  `validCardList.txt`. It is read at start-up if it exists. It holds the
  number of IDs followed by one ID per line.

## Commands

Anyone may use:

    print-stations
    print-schedule <Station>
    print-schedule-destination <Station> <Destination>
    print-schedule-time <Station> <dd/mm/yyyy HH:MM>
    print-train <trainId>
    print-wagon <trainId> <wagonId>
    buy-ticket <trainId> <wagonId> <seatId> <ticketFile> [option]
    buy-ticket-discount <trainId> <wagonId> <seatId> <ticketFile> <cardFile> [option]
    login <Username> <password>
    logout
    exit

The ticket option depends on the wagon:

- first class wagon: `true` or `false`, for whether food is included (food adds 10);
- second class wagon: the baggage weight in kilograms;
- sleep wagon: nothing.

`print-schedule-time` lists only the departures at or after the given time.
Dates and times are read and shown in local time.

Administrators may also use:

    add-station <Station>
    add-train <Station> <Destination> <distanceKm> <speedKmh> <dd/mm/yyyy HH:MM>
    remove-train <trainId>
    add-wagon <trainId> first-class <basePrice> <comfortFactor>
    add-wagon <trainId> second-class <basePrice> <pricePerKg>
    add-wagon <trainId> sleep-wagon <basePrice> <pricePer100km>
    remove-wagon <trainId> <wagonId>
    move-wagon <sourceTrainId> <wagonId> <destinationTrainId>
    create-discount-card age-card <Name> <cardFile> <age>
    create-discount-card route-card <Name> <cardFile> <Station>
    create-discount-card distance-card <Name> <cardFile> <distanceKm>
    validate-discount-card <cardId>

Rules for commands:

- Names start with a capital letter and contain only letters and underscores.
- Train IDs start at 1000. Wagon IDs start at 1 in each train.
- The comfort factor must not be greater than 1.
- Only an empty wagon can be moved, and only between trains that have not yet
  departed.

### Seats

A first class wagon has 10 seats. A second class wagon has 20, and a sleep
wagon has 5. Seats are numbered from 1. `print-wagon` draws the seat map and
marks taken seats `XX`.

### Prices

A first class ticket costs the base price times the comfort factor, plus 10
when food is included. A second class ticket costs the base price plus the
baggage weight times the price per kilogram. A sleep wagon ticket costs the
base price plus the price per 100 km for the train's distance.

### Discount cards

Card IDs are six-digit numbers. What each card takes off the price:

- **Age card:** the whole price up to age 10, half up to 18, and 20% above 18.
  Only age cards are checked against the list of issued IDs when a ticket is
  bought.
- **Route card:** the whole price when the train goes to the card's station,
  and nothing otherwise.
- **Distance card:** half the price when the journey is no longer than the
  card's distance, and 30% otherwise.

## Example session

    login Admin password
    add-station Sofia
    add-station Plovdiv
    add-train Sofia Plovdiv 150 75 01/06/2030 08:30
    add-wagon 1000 second-class 20 2
    buy-ticket 1000 1 5 ticket.txt 10
    print-schedule Sofia
    exit

## Using it from Python

`trainstation.system.TrainSystem` offers the same operations as methods. The
administrator check belongs to the commands only: the methods themselves do
not require a login.

```python
from trainstation.cardmanager import CardManager
from trainstation.commandreader import CommandReader
from trainstation.system import TrainSystem

system = TrainSystem(CardManager("cards.txt"))
system.add_station("Sofia")
system.add_station("Plovdiv")
departure = CommandReader("01/06/2030 08:30").read_datetime()
train = system.add_train("Sofia", "Plovdiv", 150, 75, departure)
system.add_wagon(train.train_id, "second-class", 20, 2)
ticket = system.buy_ticket(train.train_id, 1, 5, "ticket.txt", 10)
print(ticket.price)
print(system.schedule("Sofia"))
```

To drive a whole session, use `trainstation.cli.execute_command(system, line)`
for a single command line. `trainstation.cli.run(system, lines, out)` runs
command lines from any iterable and writes the replies to a text stream.

## Limitations

- Stations, trains, wagons and reserved seats are held in memory only and are
  lost when the session ends.
- The only things saved between sessions are:
  - the list of issued card IDs;
  - the ticket and card files themselves.
- Card numbering starts again at 100000 in every session.