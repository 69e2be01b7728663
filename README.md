# clinicsim

A time-step simulation of a physiotherapy clinic. Patients arrive at their
visit times. They are sorted into early and late lists by comparing the visit
with the appointment. They then wait in a waiting list for each treatment type.
Electro-therapy devices, ultrasound devices and gym rooms of limited capacity
serve them.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
clinicsim [INPUT_FILE]
```

If no input file is given, the program asks for one. Pressing Enter at that
prompt uses `input.txt`. If the file cannot be read or parsed, the program
prints an error and exits with status 1.

After loading, the program advances one time step, prints every list and then
waits for a line on standard input. It repeats this until standard input ends.
The lists printed are:

- idle patients
- the waiting lists
- the early and late lists
- available devices and rooms
- patients being served
- finished patients

## Input file format

All values are whitespace separated:

```
<electro devices> <ultrasound devices> <gym rooms>
<capacity of each gym room ...>
<cancel probability> <reschedule probability>
<number of patients>
<N|R> <appointment time> <visit time> <number of treatments> <E|U|X> <duration> ...
```

`N` marks a normal patient, who takes the treatments in the given order.

`R` marks a recovering patient. A recovering patient is sent to the waiting
list with the smallest total treatment latency, among the treatments they
still need. Ties are broken in the order ultrasound, electro, gym.

A patient holds at most four treatments. Treatment letters other than `E`, `U`
and `X` are read and skipped.

Example:

```
2 1 1
3
5 10
2
N 5 3 2 E 4 U 2
R 2 5 1 X 6
```

## What a time step does

`Scheduler.step()` works in this order:

1. It increments the time step.
2. It moves arriving patients (those whose visit time equals the current step) from the idle list:
   - a patient who arrives before the appointment goes to the early list;
   - a patient who arrives after the appointment goes to the late list, with a penalty of half the difference added to the appointment time.
3. It sends early patients whose appointment is now, and late patients whose penalty has elapsed, to a waiting list.
4. It assigns free devices and gym-room places to waiting patients, who then enter the serving list. That list is ordered by the time their treatment ends.

## Using it from Python

```python
from clinicsim.scheduler import Scheduler

scheduler = Scheduler()
scheduler.load_input_file("input.txt")
for _ in range(10):
    scheduler.step()
print(len(scheduler.serving), "patients in treatment")
```

The modules:

- `clinicsim.containers` provides the collections the simulation is built on:
  - `LinkedQueue` is a FIFO queue.
  - `PriQueue` is a priority queue in which the highest priority comes first and ties keep arrival order.
  - `ArrayStack` is a stack with a capacity of 100. It raises `StackFullError` when full.
- `clinicsim.waitlists` holds:
  - `UEWaitlist`, a waiting list with `insert_sorted` and `calc_treatment_latency`;
  - `XWaitlist`, which adds `pick_random_cancel_patient`;
  - `EarlyPList`, which offers `reschedule`.
- `clinicsim.patient`, `clinicsim.treatments` and `clinicsim.resources` define the patients, the therapies and the devices and rooms.
- `clinicsim.ui.UI` prints the state of a scheduler.

## What it does not do

- Treatments never complete during a step. Patients stay in the serving list, devices are not returned, and the finish list stays empty.
- The cancel and reschedule probabilities are read from the input file, but `step()` does not apply them. `XWaitlist.pick_random_cancel_patient` and `EarlyPList.reschedule` are only available to call directly.
- A patient whose visit time equals the appointment time is taken off the idle list and placed on no other list.