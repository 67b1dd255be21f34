"""Static question pools of the quiz, one per difficulty."""

from dataclasses import dataclass

from src.core.shared_types import Difficulty


@dataclass(frozen=True)
class Question:
    question: str
    options: tuple[str, ...]
    answer: str
    category: str
    explanation: str = ""


QUIZ_QUESTIONS: dict[Difficulty, list[Question]] = {
    Difficulty.EASY: [
        Question(
            "What is the capital of France?",
            ("London", "Berlin", "Paris", "Madrid"),
            "Paris",
            "Geography",
            "Paris is the capital and most populous city of France, known as the City of Light.",
        ),
        Question(
            "Which planet is known as the Red Planet?",
            ("Venus", "Mars", "Jupiter", "Saturn"),
            "Mars",
            "Science",
            "Mars appears red due to iron oxide (rust) on its surface and is the fourth planet from the Sun.",
        ),
        Question(
            "What is 2 + 2?",
            ("3", "4", "5", "6"),
            "4",
            "Math",
            "Basic arithmetic: 2 + 2 = 4. This is one of the fundamental addition facts.",
        ),
        Question(
            "Who painted the Mona Lisa?",
            ("Van Gogh", "Picasso", "Da Vinci", "Monet"),
            "Da Vinci",
            "Art",
            "Leonardo da Vinci painted the Mona Lisa in the 16th century during the Renaissance period.",
        ),
        Question(
            "What is the largest ocean on Earth?",
            ("Atlantic", "Indian", "Arctic", "Pacific"),
            "Pacific",
            "Geography",
            "The Pacific Ocean covers about 63 million square miles and is larger than all land areas combined.",
        ),
        Question(
            "How many continents are there?",
            ("5", "6", "7", "8"),
            "7",
            "Geography",
            "The seven continents are: Asia, Africa, North America, South America, Antarctica, Europe, and Australia.",
        ),
        Question(
            "What is the color of a ripe banana?",
            ("Red", "Blue", "Yellow", "Green"),
            "Yellow",
            "General",
            "Ripe bananas are yellow due to the breakdown of chlorophyll and production of carotenoids.",
        ),
        Question(
            "Which animal is known as the 'King of the Jungle'?",
            ("Elephant", "Lion", "Tiger", "Gorilla"),
            "Lion",
            "Science",
            "Lions are often called the King of the Jungle due to their majestic appearance and position at the top of the food chain.",
        ),
        Question(
            "What is the largest land animal?",
            ("Elephant", "Giraffe", "Hippo", "Rhino"),
            "Elephant",
            "Science",
            "African elephants are the largest land animals, weighing up to 6,000 kg (13,000 lb).",
        ),
        Question(
            "Which month has the fewest days?",
            ("January", "February", "April", "November"),
            "February",
            "General",
            "February has 28 days in common years and 29 in leap years, making it the shortest month.",
        ),
        Question(
            "What is 5 × 6?",
            ("25", "30", "35", "40"),
            "30",
            "Math",
            "5 multiplied by 6 equals 30. This is part of the 5 times table in multiplication.",
        ),
        Question(
            "Which is the smallest planet in our solar system?",
            ("Mars", "Venus", "Mercury", "Pluto"),
            "Mercury",
            "Science",
            "Mercury is the smallest and innermost planet in the Solar System, with a diameter of about 4,880 km.",
        ),
        Question(
            "How many sides does a triangle have?",
            ("2", "3", "4", "5"),
            "3",
            "Math",
            "A triangle is a polygon with three edges and three vertices. The sum of its interior angles is 180 degrees.",
        ),
        Question(
            "What do bees collect from flowers?",
            ("Water", "Nectar", "Leaves", "Seeds"),
            "Nectar",
            "Science",
            "Bees collect nectar from flowers to make honey, which serves as their food source.",
        ),
        Question(
            "Which season comes after winter?",
            ("Spring", "Summer", "Autumn", "Monsoon"),
            "Spring",
            "General",
            "The four seasons in order are: Winter, Spring, Summer, and Autumn (Fall).",
        ),
        Question(
            "What is 10 - 4?",
            ("5", "6", "7", "8"),
            "6",
            "Math",
            "10 minus 4 equals 6. This is basic subtraction.",
        ),
        Question(
            "Which color is an emerald?",
            ("Red", "Blue", "Green", "Yellow"),
            "Green",
            "General",
            "Emeralds are precious gemstones known for their rich green color, which comes from chromium and vanadium.",
        ),
        Question(
            "How many hours are in a day?",
            ("12", "24", "36", "48"),
            "24",
            "General",
            "There are 24 hours in a day, which is the time it takes Earth to complete one rotation on its axis.",
        ),
        Question(
            "What is the capital of Italy?",
            ("Paris", "Madrid", "Rome", "Berlin"),
            "Rome",
            "Geography",
            "Rome is the capital city of Italy and was the center of the ancient Roman Empire.",
        ),
        Question(
            "Which animal says 'moo'?",
            ("Dog", "Cat", "Cow", "Sheep"),
            "Cow",
            "General",
            "Cows make a 'moo' sound, which is one of the most recognizable animal sounds.",
        ),
        Question(
            "What do you use to write on paper?",
            ("Spoon", "Pen", "Knife", "Hammer"),
            "Pen",
            "General",
            "Pens are writing instruments used to apply ink to surfaces, typically paper.",
        ),
        Question(
            "How many days are in a week?",
            ("5", "6", "7", "8"),
            "7",
            "General",
            "There are 7 days in a week: Monday, Tuesday, Wednesday, Thursday, Friday, Saturday, and Sunday.",
        ),
        Question(
            "What is the color of snow?",
            ("Black", "Blue", "White", "Green"),
            "White",
            "General",
            "Snow appears white because it reflects all visible wavelengths of light equally.",
        ),
        Question(
            "Which fruit is yellow and curved?",
            ("Apple", "Orange", "Banana", "Grape"),
            "Banana",
            "General",
            "Bananas are typically yellow when ripe and have a characteristic curved shape.",
        ),
        Question(
            "What is 3 × 4?",
            ("7", "12", "15", "20"),
            "12",
            "Math",
            "3 multiplied by 4 equals 12. This is part of the basic multiplication table.",
        ),
        Question(
            "Which is the largest big cat?",
            ("Leopard", "Lion", "Tiger", "Cheetah"),
            "Tiger",
            "Science",
            "Tigers are the largest wild cats in the world, with Siberian tigers being the biggest subspecies.",
        ),
        Question(
            "What is the opposite of 'hot'?",
            ("Warm", "Cold", "Cool", "Freezing"),
            "Cold",
            "General",
            "Cold is the direct opposite of hot in terms of temperature.",
        ),
        Question(
            "How many legs does a spider have?",
            ("6", "8", "10", "12"),
            "8",
            "Science",
            "Spiders are arachnids, which have eight legs, unlike insects that have six.",
        ),
        Question(
            "What is the capital of Japan?",
            ("Beijing", "Seoul", "Tokyo", "Bangkok"),
            "Tokyo",
            "Geography",
            "Tokyo is the capital and most populous city of Japan, located on the island of Honshu.",
        ),
        Question(
            "Which planet is known for its rings?",
            ("Mars", "Jupiter", "Saturn", "Neptune"),
            "Saturn",
            "Science",
            "Saturn has the most extensive and visible ring system of any planet in our solar system.",
        ),
        Question(
            "What is 15 ÷ 3?",
            ("3", "4", "5", "6"),
            "5",
            "Math",
            "15 divided by 3 equals 5. Division is the inverse operation of multiplication.",
        ),
        Question(
            "Which bird can't fly but can swim?",
            ("Eagle", "Penguin", "Sparrow", "Ostrich"),
            "Penguin",
            "Science",
            "Penguins are flightless birds that are excellent swimmers, using their wings as flippers.",
        ),
        Question(
            "What is the main language spoken in Brazil?",
            ("Spanish", "Portuguese", "English", "French"),
            "Portuguese",
            "Geography",
            "Brazil is the only Portuguese-speaking country in South America due to its colonial history.",
        ),
        Question(
            "How many cents are in a dollar?",
            ("10", "50", "100", "1000"),
            "100",
            "General",
            "There are 100 cents in one US dollar, which is the basic unit of currency in the United States.",
        ),
        Question(
            "What is the color of a school bus?",
            ("Red", "Blue", "Yellow", "Green"),
            "Yellow",
            "General",
            "School buses are typically yellow because this color is highly visible and attracts attention easily.",
        ),
        Question(
            "Which month comes after June?",
            ("May", "July", "August", "September"),
            "July",
            "General",
            "The months in order are: January, February, March, April, May, June, July, August, September, October, November, December.",
        ),
        Question(
            "What is 9 + 7?",
            ("15", "16", "17", "18"),
            "16",
            "Math",
            "9 plus 7 equals 16. This is basic addition.",
        ),
        Question(
            "Which animal has a trunk?",
            ("Giraffe", "Elephant", "Rhino", "Hippo"),
            "Elephant",
            "Science",
            "Elephants have long trunks that they use for breathing, smelling, drinking, and grasping objects.",
        ),
        Question(
            "What is the capital of Canada?",
            ("Toronto", "Vancouver", "Ottawa", "Montreal"),
            "Ottawa",
            "Geography",
            "Ottawa was chosen as the capital of Canada in 1857 by Queen Victoria and is located in Ontario.",
        ),
    ],
    Difficulty.MEDIUM: [
        Question(
            "What is the chemical symbol for gold?",
            ("Go", "Gd", "Au", "Ag"),
            "Au",
            "Science",
            "Au comes from the Latin word for gold, 'aurum'. Gold is a precious metal used in jewelry and electronics.",
        ),
        Question(
            "Which language has the most native speakers?",
            ("English", "Spanish", "Hindi", "Mandarin"),
            "Mandarin",
            "General",
            "Mandarin Chinese has over 900 million native speakers, making it the most spoken language in the world.",
        ),
        Question(
            "In which year did World War II end?",
            ("1943", "1945", "1947", "1950"),
            "1945",
            "History",
            "World War II ended in 1945 with the surrender of Germany in May and Japan in September.",
        ),
        Question(
            "What is the largest mammal in the world?",
            ("Elephant", "Blue Whale", "Giraffe", "Hippopotamus"),
            "Blue Whale",
            "Science",
            "Blue whales can reach up to 100 feet in length and 200 tons in weight, making them the largest animals ever known.",
        ),
        Question(
            "Who wrote 'Romeo and Juliet'?",
            ("Charles Dickens", "William Shakespeare", "Jane Austen", "Mark Twain"),
            "William Shakespeare",
            "Literature",
            "Shakespeare wrote this famous tragedy in the late 16th century about two young star-crossed lovers.",
        ),
        Question(
            "What is the hardest natural substance on Earth?",
            ("Gold", "Iron", "Diamond", "Platinum"),
            "Diamond",
            "Science",
            "Diamond is the hardest known natural material on the Mohs scale, with a rating of 10.",
        ),
        Question(
            "Which country is known as the Land of the Rising Sun?",
            ("China", "Thailand", "Japan", "South Korea"),
            "Japan",
            "Geography",
            "Japan is called the Land of the Rising Sun because it lies to the east of the Asian mainland, where the sun appears to rise.",
        ),
        Question(
            "How many bones are in the human body?",
            ("186", "206", "226", "246"),
            "206",
            "Science",
            "An adult human has 206 bones, while babies have about 300 that fuse together as they grow.",
        ),
        Question(
            "What is the capital of Australia?",
            ("Sydney", "Melbourne", "Canberra", "Perth"),
            "Canberra",
            "Geography",
            "Canberra was purpose-built as the capital of Australia in 1908 as a compromise between Sydney and Melbourne.",
        ),
        Question(
            "Which planet is closest to the Sun?",
            ("Venus", "Mars", "Mercury", "Earth"),
            "Mercury",
            "Science",
            "Mercury is the closest planet to the Sun in our solar system, with an average distance of about 36 million miles.",
        ),
        Question(
            "What is the square root of 64?",
            ("6", "7", "8", "9"),
            "8",
            "Math",
            "8 multiplied by 8 equals 64, so the square root of 64 is 8.",
        ),
        Question(
            "Which element has the chemical symbol 'O'?",
            ("Gold", "Oxygen", "Osmium", "Oganesson"),
            "Oxygen",
            "Science",
            "Oxygen is essential for most life forms and makes up about 21% of Earth's atmosphere.",
        ),
        Question(
            "Who discovered America in 1492?",
            ("Vasco da Gama", "Christopher Columbus", "Ferdinand Magellan", "Marco Polo"),
            "Christopher Columbus",
            "History",
            "Christopher Columbus made four voyages across the Atlantic Ocean, opening the way for European exploration.",
        ),
        Question(
            "What is the main ingredient in guacamole?",
            ("Tomato", "Avocado", "Pepper", "Onion"),
            "Avocado",
            "General",
            "Guacamole is a traditional Mexican dip made primarily from mashed avocados with various seasonings.",
        ),
        Question(
            "Which organ pumps blood throughout the body?",
            ("Liver", "Heart", "Lungs", "Brain"),
            "Heart",
            "Science",
            "The heart is a muscular organ that circulates blood through the blood vessels by repeated rhythmic contractions.",
        ),
        Question(
            "What is the capital of Brazil?",
            ("Rio de Janeiro", "São Paulo", "Brasília", "Salvador"),
            "Brasília",
            "Geography",
            "Brasília became the capital of Brazil in 1960, replacing Rio de Janeiro, and is known for its modernist architecture.",
        ),
        Question(
            "Which planet is known for its rings?",
            ("Jupiter", "Saturn", "Uranus", "Neptune"),
            "Saturn",
            "Science",
            "Saturn has the most prominent ring system of any planet, composed mainly of ice particles with some rock debris.",
        ),
        Question(
            "What is the chemical symbol for silver?",
            ("Si", "Sv", "Ag", "Au"),
            "Ag",
            "Science",
            "Ag comes from the Latin word for silver, 'argentum'. Silver is a precious metal with high electrical conductivity.",
        ),
        Question(
            "Who wrote 'The Odyssey'?",
            ("Virgil", "Homer", "Sophocles", "Plato"),
            "Homer",
            "Literature",
            "Homer is the legendary author of both 'The Iliad' and 'The Odyssey', two epic poems of ancient Greece.",
        ),
        Question(
            "What is the largest island in the world?",
            ("Australia", "Greenland", "Borneo", "Madagascar"),
            "Greenland",
            "Geography",
            "Greenland is the world's largest island, covering about 2.16 million square kilometers (836,000 sq mi).",
        ),
        Question(
            "Which gas do plants absorb from the atmosphere?",
            ("Oxygen", "Nitrogen", "Carbon Dioxide", "Hydrogen"),
            "Carbon Dioxide",
            "Science",
            "Plants absorb carbon dioxide during photosynthesis to produce glucose and oxygen.",
        ),
        Question(
            "What is the capital of Egypt?",
            ("Alexandria", "Cairo", "Luxor", "Giza"),
            "Cairo",
            "Geography",
            "Cairo is the capital of Egypt and the largest city in the Arab world, located near the Nile Delta.",
        ),
        Question(
            "Who painted 'The Last Supper'?",
            ("Michelangelo", "Raphael", "Leonardo da Vinci", "Caravaggio"),
            "Leonardo da Vinci",
            "Art",
            "Leonardo da Vinci painted 'The Last Supper' in the late 15th century, depicting Jesus and his disciples.",
        ),
        Question(
            "What is the smallest country in the world?",
            ("Monaco", "Vatican City", "San Marino", "Liechtenstein"),
            "Vatican City",
            "Geography",
            "Vatican City is an independent city-state enclaved within Rome, Italy, with an area of just 0.17 square miles.",
        ),
        Question(
            "Which element is essential for combustion?",
            ("Nitrogen", "Oxygen", "Carbon Dioxide", "Helium"),
            "Oxygen",
            "Science",
            "Oxygen supports combustion, which is why fires need oxygen to burn. This is called an oxidizing agent.",
        ),
        Question(
            "What is the capital of Russia?",
            ("St. Petersburg", "Moscow", "Kiev", "Warsaw"),
            "Moscow",
            "Geography",
            "Moscow is the capital and most populous city of Russia, located on the Moskva River in western Russia.",
        ),
        Question(
            "Who invented the telephone?",
            ("Thomas Edison", "Alexander Graham Bell", "Nikola Tesla", "Guglielmo Marconi"),
            "Alexander Graham Bell",
            "Science",
            "Alexander Graham Bell was awarded the first U.S. patent for the telephone in 1876.",
        ),
        Question(
            "What is the main component of the Sun?",
            ("Oxygen", "Helium", "Hydrogen", "Carbon"),
            "Hydrogen",
            "Science",
            "The Sun is primarily composed of hydrogen (about 74%) and helium (about 24%), with trace amounts of other elements.",
        ),
        Question(
            "Which ocean is the smallest?",
            ("Atlantic", "Indian", "Arctic", "Southern"),
            "Arctic",
            "Geography",
            "The Arctic Ocean is the smallest and shallowest of the world's five major oceans.",
        ),
        Question(
            "What is the chemical formula for water?",
            ("CO2", "H2O", "O2", "NaCl"),
            "H2O",
            "Science",
            "Water is composed of two hydrogen atoms bonded to one oxygen atom, giving it the chemical formula H2O.",
        ),
        Question(
            "Who wrote 'Hamlet'?",
            ("Charles Dickens", "William Shakespeare", "Jane Austen", "Mark Twain"),
            "William Shakespeare",
            "Literature",
            "William Shakespeare wrote 'Hamlet' around 1599-1601, one of his most famous tragedies.",
        ),
        Question(
            "What is the capital of South Africa?",
            ("Johannesburg", "Cape Town", "Pretoria", "Durban"),
            "Pretoria",
            "Geography",
            "South Africa has three capital cities: Pretoria (administrative), Cape Town (legislative), and Bloemfontein (judicial).",
        ),
        Question(
            "Which planet is known as the Evening Star?",
            ("Mars", "Jupiter", "Venus", "Mercury"),
            "Venus",
            "Science",
            "Venus is often called the Evening Star or Morning Star because it's visible near sunrise or sunset.",
        ),
        Question(
            "What is the largest desert in Africa?",
            ("Kalahari", "Sahara", "Namib", "Libyan"),
            "Sahara",
            "Geography",
            "The Sahara Desert is the largest hot desert in the world, covering most of North Africa.",
        ),
        Question(
            "Who discovered gravity?",
            ("Albert Einstein", "Isaac Newton", "Galileo Galilei", "Nikola Tesla"),
            "Isaac Newton",
            "Science",
            "Isaac Newton formulated the law of universal gravitation in the 17th century after observing an apple fall from a tree.",
        ),
        Question(
            "What is the capital of China?",
            ("Shanghai", "Beijing", "Hong Kong", "Guangzhou"),
            "Beijing",
            "Geography",
            "Beijing is the capital of the People's Republic of China and has been the political center of China for centuries.",
        ),
        Question(
            "Which gas makes up most of Earth's atmosphere?",
            ("Oxygen", "Carbon Dioxide", "Nitrogen", "Argon"),
            "Nitrogen",
            "Science",
            "Nitrogen makes up about 78% of Earth's atmosphere, while oxygen accounts for about 21%.",
        ),
        Question(
            "What is the longest river in the world?",
            ("Amazon", "Nile", "Yangtze", "Mississippi"),
            "Nile",
            "Geography",
            "The Nile River in Africa is traditionally considered the longest river in the world at about 6,650 km (4,130 mi).",
        ),
        Question(
            "Who painted the Sistine Chapel ceiling?",
            ("Leonardo da Vinci", "Raphael", "Michelangelo", "Donatello"),
            "Michelangelo",
            "Art",
            "Michelangelo painted the Sistine Chapel ceiling between 1508 and 1512, including the famous 'Creation of Adam'.",
        ),
        Question(
            "What is the chemical symbol for iron?",
            ("Ir", "Fe", "In", "Au"),
            "Fe",
            "Science",
            "Fe comes from the Latin word for iron, 'ferrum'. Iron is the most common element on Earth by mass.",
        ),
        Question(
            "Which country has the most population?",
            ("India", "United States", "China", "Indonesia"),
            "China",
            "Geography",
            "China has the world's largest population with over 1.4 billion people, though India is close behind.",
        ),
    ],
    Difficulty.HARD: [
        Question(
            "What is the speed of light in vacuum?",
            ("299,792 km/s", "150,000 km/s", "450,000 km/s", "1,000,000 km/s"),
            "299,792 km/s",
            "Science",
            "The speed of light in vacuum is exactly 299,792,458 meters per second, a fundamental constant in physics.",
        ),
        Question(
            "Which element has the atomic number 1?",
            ("Oxygen", "Hydrogen", "Helium", "Carbon"),
            "Hydrogen",
            "Science",
            "Hydrogen is the lightest and most abundant element in the universe, with atomic number 1.",
        ),
        Question(
            "What is the capital of Azerbaijan?",
            ("Baku", "Ankara", "Tbilisi", "Yerevan"),
            "Baku",
            "Geography",
            "Baku is the capital and largest city of Azerbaijan, located on the Caspian Sea.",
        ),
        Question(
            "Who discovered penicillin?",
            ("Marie Curie", "Alexander Fleming", "Louis Pasteur", "Robert Koch"),
            "Alexander Fleming",
            "Science",
            "Alexander Fleming discovered penicillin in 1928, revolutionizing medicine by introducing antibiotics.",
        ),
        Question(
            "What is the largest desert in the world?",
            ("Sahara", "Gobi", "Arabian", "Antarctic"),
            "Antarctic",
            "Geography",
            "The Antarctic Desert is the largest desert in the world by area, covering about 14 million square kilometers.",
        ),
        Question(
            "In which year did the Titanic sink?",
            ("1910", "1912", "1914", "1916"),
            "1912",
            "History",
            "The RMS Titanic sank on April 15, 1912, after hitting an iceberg on its maiden voyage from Southampton to New York.",
        ),
        Question(
            "What is the square root of 144?",
            ("11", "12", "13", "14"),
            "12",
            "Math",
            "12 multiplied by 12 equals 144, so the square root of 144 is 12.",
        ),
        Question(
            "Which composer went deaf in his later years?",
            ("Mozart", "Bach", "Beethoven", "Chopin"),
            "Beethoven",
            "Music",
            "Ludwig van Beethoven began losing his hearing in his late 20s and was almost completely deaf by his last years, yet continued composing.",
        ),
        Question(
            "What is the chemical formula for table salt?",
            ("NaCl", "KCl", "CaCl2", "MgCl2"),
            "NaCl",
            "Science",
            "Table salt is sodium chloride, composed of sodium (Na) and chlorine (Cl) ions in a 1:1 ratio.",
        ),
        Question(
            "What is the atomic number of carbon?",
            ("6", "7", "8", "9"),
            "6",
            "Science",
            "Carbon has 6 protons in its nucleus, giving it atomic number 6. It's the basis for all organic life.",
        ),
        Question(
            "Who wrote '1984'?",
            ("Aldous Huxley", "George Orwell", "Ray Bradbury", "H.G. Wells"),
            "George Orwell",
            "Literature",
            "George Orwell published '1984' in 1949 as a dystopian social science fiction novel about totalitarian control.",
        ),
        Question(
            "What is the smallest country in the world?",
            ("Monaco", "Vatican City", "San Marino", "Liechtenstein"),
            "Vatican City",
            "Geography",
            "Vatican City is only 0.17 square miles (0.44 square kilometers) in area, making it the world's smallest independent state.",
        ),
        Question(
            "Which planet has the most moons?",
            ("Jupiter", "Saturn", "Uranus", "Neptune"),
            "Saturn",
            "Science",
            "Saturn has over 80 confirmed moons, with more being discovered regularly through advanced observations.",
        ),
        Question(
            "What is the capital of Canada?",
            ("Toronto", "Vancouver", "Ottawa", "Montreal"),
            "Ottawa",
            "Geography",
            "Ottawa was chosen as the capital of Canada in 1857 by Queen Victoria as a compromise between English and French interests.",
        ),
        Question(
            "What is the chemical symbol for silver?",
            ("Si", "Sv", "Ag", "Au"),
            "Ag",
            "Science",
            "Ag comes from the Latin word for silver, 'argentum'. Silver has the highest electrical conductivity of any element.",
        ),
        Question(
            "Who wrote 'The Odyssey'?",
            ("Virgil", "Homer", "Sophocles", "Plato"),
            "Homer",
            "Literature",
            "Homer is the legendary author of 'The Odyssey', an epic poem about Odysseus' journey home after the Trojan War.",
        ),
        Question(
            "What is the Heisenberg Uncertainty Principle about?",
            ("Position and momentum", "Time and energy", "Mass and velocity", "Charge and spin"),
            "Position and momentum",
            "Science",
            "The Heisenberg Uncertainty Principle states that the more precisely the position of a particle is known, the less precisely its momentum can be known, and vice versa.",
        ),
        Question(
            "In which year was the Berlin Wall demolished?",
            ("1987", "1989", "1991", "1993"),
            "1989",
            "History",
            "The Berlin Wall was opened on November 9, 1989, leading to German reunification and symbolizing the end of the Cold War.",
        ),
        Question(
            "What is the capital of Argentina?",
            ("Buenos Aires", "Santiago", "Lima", "Montevideo"),
            "Buenos Aires",
            "Geography",
            "Buenos Aires is the capital and largest city of Argentina, known for its European-style architecture and vibrant culture.",
        ),
        Question(
            "Who developed the polio vaccine?",
            ("Louis Pasteur", "Alexander Fleming", "Jonas Salk", "Robert Koch"),
            "Jonas Salk",
            "Science",
            "Jonas Salk developed the first successful polio vaccine in 1955, which nearly eradicated the disease worldwide.",
        ),
        Question(
            "What is the molecular formula of benzene?",
            ("C6H6", "C6H12", "C7H8", "C8H10"),
            "C6H6",
            "Science",
            "Benzene has the molecular formula C6H6 and features a hexagonal ring structure with alternating double bonds.",
        ),
        Question(
            "Which ancient civilization built Machu Picchu?",
            ("Aztec", "Maya", "Inca", "Olmec"),
            "Inca",
            "History",
            "The Inca civilization built Machu Picchu in the 15th century as an estate for emperor Pachacuti.",
        ),
        Question(
            "What is the boiling point of water in Fahrenheit?",
            ("100°F", "180°F", "212°F", "32°F"),
            "212°F",
            "Science",
            "Water boils at 212°F (100°C) at standard atmospheric pressure at sea level.",
        ),
        Question(
            "Who wrote 'War and Peace'?",
            ("Fyodor Dostoevsky", "Leo Tolstoy", "Anton Chekhov", "Vladimir Nabokov"),
            "Leo Tolstoy",
            "Literature",
            "Leo Tolstoy wrote 'War and Peace' between 1865 and 1869, chronicling French invasion of Russia and its impact on society.",
        ),
        Question(
            "What is the capital of Turkey?",
            ("Istanbul", "Ankara", "Izmir", "Antalya"),
            "Ankara",
            "Geography",
            "Ankara became the capital of Turkey in 1923, replacing Istanbul, as part of Mustafa Kemal Atatürk's modernization reforms.",
        ),
        Question(
            "Which element is liquid at room temperature?",
            ("Bromine", "Chlorine", "Iodine", "Fluorine"),
            "Bromine",
            "Science",
            "Bromine is one of only two elements that are liquid at room temperature, the other being mercury.",
        ),
        Question(
            "Who was the first woman to win a Nobel Prize?",
            ("Marie Curie", "Rosalind Franklin", "Dorothy Hodgkin", "Maria Goeppert-Mayer"),
            "Marie Curie",
            "Science",
            "Marie Curie won the Nobel Prize in Physics in 1903 (shared) and in Chemistry in 1911, making her the first woman Nobel laureate.",
        ),
        Question(
            "What is the largest moon in our solar system?",
            ("Titan", "Ganymede", "Moon", "Europa"),
            "Ganymede",
            "Science",
            "Ganymede, a moon of Jupiter, is the largest moon in our solar system, even larger than the planet Mercury.",
        ),
        Question(
            "Which country has the longest coastline?",
            ("Russia", "Canada", "Indonesia", "Australia"),
            "Canada",
            "Geography",
            "Canada has the world's longest coastline at 202,080 kilometers (125,567 miles), bordering three oceans.",
        ),
        Question(
            "What is the chemical symbol for potassium?",
            ("P", "Po", "K", "Pt"),
            "K",
            "Science",
            "K comes from the Latin word for potassium, 'kalium'. Potassium is essential for nerve function and fluid balance in the body.",
        ),
        Question(
            "Who painted 'Girl with a Pearl Earring'?",
            ("Rembrandt", "Vermeer", "Van Gogh", "Monet"),
            "Vermeer",
            "Art",
            "Johannes Vermeer painted 'Girl with a Pearl Earring' around 1665, often called the 'Mona Lisa of the North'.",
        ),
        Question(
            "What is the deepest point in the ocean?",
            ("Puerto Rico Trench", "Java Trench", "Mariana Trench", "Tonga Trench"),
            "Mariana Trench",
            "Geography",
            "The Mariana Trench in the Pacific Ocean reaches a depth of about 36,000 feet (11,000 meters) at Challenger Deep.",
        ),
        Question(
            "Which planet has the shortest day?",
            ("Mercury", "Venus", "Jupiter", "Mars"),
            "Jupiter",
            "Science",
            "Jupiter has the shortest day of all planets, completing one rotation in about 9 hours and 56 minutes.",
        ),
        Question(
            "Who wrote 'The Divine Comedy'?",
            ("Dante Alighieri", "Giovanni Boccaccio", "Francesco Petrarca", "Niccolò Machiavelli"),
            "Dante Alighieri",
            "Literature",
            "Dante Alighieri wrote 'The Divine Comedy' between 1308 and 1320, describing his journey through Hell, Purgatory, and Paradise.",
        ),
        Question(
            "What is the capital of Mongolia?",
            ("Ulaanbaatar", "Astana", "Bishkek", "Dushanbe"),
            "Ulaanbaatar",
            "Geography",
            "Ulaanbaatar is the capital and largest city of Mongolia, with almost half of the country's population living there.",
        ),
        Question(
            "Which element has the highest melting point?",
            ("Tungsten", "Carbon", "Osmium", "Rhenium"),
            "Carbon",
            "Science",
            "Carbon (as graphite) sublimates at about 3900 K, higher than tungsten's melting point of 3695 K.",
        ),
        Question(
            "Who discovered X-rays?",
            ("Marie Curie", "Wilhelm Röntgen", "J.J. Thomson", "Ernest Rutherford"),
            "Wilhelm Röntgen",
            "Science",
            "Wilhelm Röntgen discovered X-rays in 1895 and won the first Nobel Prize in Physics in 1901 for this discovery.",
        ),
    ],
    Difficulty.EXTREME: [
        Question(
            "What is the approximate value of the mathematical constant e?",
            ("2.71828", "3.14159", "1.61803", "0.57721"),
            "2.71828",
            "Math",
            "Euler's number (e) is approximately 2.71828 and is the base of natural logarithms. It's fundamental in calculus and complex analysis.",
        ),
        Question(
            "Which philosopher said 'I think, therefore I am'?",
            ("Plato", "Aristotle", "Descartes", "Kant"),
            "Descartes",
            "Philosophy",
            "René Descartes coined this phrase in his work 'Discourse on the Method' as a fundamental element of his philosophy.",
        ),
        Question(
            "What is the smallest bone in the human body?",
            ("Stapes", "Incus", "Malleus", "Cochlea"),
            "Stapes",
            "Science",
            "The stapes bone in the middle ear is the smallest bone in the human body, measuring about 3 × 2.5 mm.",
        ),
        Question(
            "In which year was the first iPhone released?",
            ("2005", "2007", "2009", "2010"),
            "2007",
            "Technology",
            "Steve Jobs announced the first iPhone on January 9, 2007, and it went on sale on June 29, 2007.",
        ),
        Question(
            "What is the chemical formula for ammonia?",
            ("NH3", "NH4", "NO2", "CH4"),
            "NH3",
            "Science",
            "Ammonia is a compound of nitrogen and hydrogen with the formula NH3. It's widely used in fertilizers and cleaning products.",
        ),
        Question(
            "What is the capital of Bhutan?",
            ("Kathmandu", "Thimphu", "Dhaka", "Colombo"),
            "Thimphu",
            "Geography",
            "Thimphu is the capital and largest city of Bhutan, located in the western central part of the country.",
        ),
        Question(
            "Which element has the highest melting point?",
            ("Tungsten", "Carbon", "Osmium", "Rhenium"),
            "Carbon",
            "Science",
            "Carbon (as graphite) sublimates at about 3900 K, higher than tungsten's melting point of 3695 K.",
        ),
        Question(
            "Who developed the theory of relativity?",
            ("Newton", "Einstein", "Hawking", "Galileo"),
            "Einstein",
            "Science",
            "Albert Einstein published his special theory of relativity in 1905 and general relativity in 1915, revolutionizing physics.",
        ),
        Question(
            "What is the largest prime number less than 100?",
            ("89", "91", "97", "99"),
            "97",
            "Math",
            "97 is the largest prime number below 100. Prime numbers are only divisible by 1 and themselves.",
        ),
        Question(
            "What is the SI unit of electric current?",
            ("Volt", "Ampere", "Ohm", "Watt"),
            "Ampere",
            "Science",
            "The ampere is the SI base unit for electric current, named after French physicist André-Marie Ampère.",
        ),
        Question(
            "Who painted 'The Starry Night'?",
            ("Picasso", "Monet", "Van Gogh", "Rembrandt"),
            "Van Gogh",
            "Art",
            "Vincent van Gogh painted 'The Starry Night' in 1889 while in an asylum at Saint-Rémy-de-Provence.",
        ),
        Question(
            "What is the speed of sound in dry air at 20°C?",
            ("331 m/s", "343 m/s", "299 m/s", "320 m/s"),
            "343 m/s",
            "Science",
            "The speed of sound in dry air at 20°C is approximately 343 meters per second (1,125 ft/s).",
        ),
        Question(
            "Which ancient wonder was located in Alexandria?",
            ("Hanging Gardens", "Great Pyramid", "Lighthouse", "Colossus"),
            "Lighthouse",
            "History",
            "The Lighthouse of Alexandria was one of the Seven Wonders of the Ancient World, standing over 100 meters tall.",
        ),
        Question(
            "What is the molecular formula of glucose?",
            ("C6H12O6", "C12H22O11", "C2H5OH", "CH3COOH"),
            "C6H12O6",
            "Science",
            "Glucose is a simple sugar with the molecular formula C6H12O6. It's the primary source of energy for living organisms.",
        ),
        Question(
            "Who wrote 'The Republic'?",
            ("Aristotle", "Socrates", "Plato", "Confucius"),
            "Plato",
            "Philosophy",
            "Plato wrote 'The Republic' around 375 BCE, discussing justice, the character of the just city-state, and the just man.",
        ),
        Question(
            "What is the Heisenberg Uncertainty Principle about?",
            ("Position and momentum", "Time and energy", "Mass and velocity", "Charge and spin"),
            "Position and momentum",
            "Science",
            "The Heisenberg Uncertainty Principle is a fundamental concept in quantum mechanics stating that certain pairs of physical properties cannot be simultaneously known to arbitrary precision.",
        ),
        Question(
            "In which year was the Berlin Wall demolished?",
            ("1987", "1989", "1991", "1993"),
            "1989",
            "History",
            "The Berlin Wall fell on November 9, 1989, after 28 years of dividing East and West Berlin during the Cold War.",
        ),
        Question(
            "What is the capital of Burkina Faso?",
            ("Bamako", "Ouagadougou", "Niamey", "Accra"),
            "Ouagadougou",
            "Geography",
            "Ouagadougou is the capital and largest city of Burkina Faso, serving as the cultural, economic, and administrative center.",
        ),
        Question(
            "Who proved Fermat's Last Theorem?",
            ("Andrew Wiles", "Terence Tao", "Grigori Perelman", "John Nash"),
            "Andrew Wiles",
            "Math",
            "Andrew Wiles proved Fermat's Last Theorem in 1994 after 358 years of the problem remaining unsolved.",
        ),
        Question(
            "What is the chemical symbol for tungsten?",
            ("Tn", "Tu", "W", "Tg"),
            "W",
            "Science",
            "W comes from the German name for tungsten, 'Wolfram'. Tungsten has the highest melting point of all metals.",
        ),
        Question(
            "Who composed 'The Four Seasons'?",
            ("Mozart", "Vivaldi", "Bach", "Handel"),
            "Vivaldi",
            "Music",
            "Antonio Vivaldi composed 'The Four Seasons' in 1723, a set of four violin concertos that represent each season.",
        ),
        Question(
            "What is the approximate value of the golden ratio?",
            ("1.41421", "1.61803", "2.71828", "3.14159"),
            "1.61803",
            "Math",
            "The golden ratio (φ) is approximately 1.61803 and appears frequently in mathematics, art, architecture, and nature.",
        ),
        Question(
            "Which element is named after Alfred Nobel?",
            ("Nobelium", "Curium", "Einsteinium", "Fermium"),
            "Nobelium",
            "Science",
            "Nobelium (atomic number 102) is named after Alfred Nobel, the founder of the Nobel Prize.",
        ),
        Question(
            "Who wrote 'One Hundred Years of Solitude'?",
            ("Pablo Neruda", "Gabriel García Márquez", "Jorge Luis Borges", "Isabel Allende"),
            "Gabriel García Márquez",
            "Literature",
            "Gabriel García Márquez wrote 'One Hundred Years of Solitude' in 1967, a landmark of magical realism.",
        ),
        Question(
            "What is the capital of Kazakhstan?",
            ("Almaty", "Astana", "Bishkek", "Tashkent"),
            "Astana",
            "Geography",
            "Astana became the capital of Kazakhstan in 1997, replacing Almaty. It was renamed Nur-Sultan in 2019 but changed back to Astana in 2022.",
        ),
        Question(
            "Which particle is known as the 'God particle'?",
            ("Electron", "Higgs boson", "Neutrino", "Quark"),
            "Higgs boson",
            "Science",
            "The Higgs boson is often called the 'God particle' because it helps explain why other particles have mass.",
        ),
        Question(
            "Who developed the first computer algorithm?",
            ("Alan Turing", "Charles Babbage", "Ada Lovelace", "John von Neumann"),
            "Ada Lovelace",
            "Technology",
            "Ada Lovelace wrote the first algorithm intended for Charles Babbage's Analytical Engine in the 1840s.",
        ),
        Question(
            "What is the chemical formula for ozone?",
            ("O2", "O3", "CO2", "NO2"),
            "O3",
            "Science",
            "Ozone is a molecule composed of three oxygen atoms (O3) and forms a protective layer in the Earth's stratosphere.",
        ),
        Question(
            "Which mathematician developed non-Euclidean geometry?",
            ("Euclid", "Bernhard Riemann", "Carl Gauss", "Nikolai Lobachevsky"),
            "Nikolai Lobachevsky",
            "Math",
            "Nikolai Lobachevsky developed hyperbolic geometry in the 1820s, the first complete non-Euclidean geometry.",
        ),
        Question(
            "What is the capital of Eritrea?",
            ("Addis Ababa", "Asmara", "Khartoum", "Djibouti"),
            "Asmara",
            "Geography",
            "Asmara is the capital and most populous city of Eritrea, known for its well-preserved Italian modernist architecture.",
        ),
        Question(
            "Who discovered the structure of DNA?",
            ("Rosalind Franklin", "James Watson and Francis Crick", "Linus Pauling", "Maurice Wilkins"),
            "James Watson and Francis Crick",
            "Science",
            "James Watson and Francis Crick discovered the double helix structure of DNA in 1953 with contributions from Rosalind Franklin's X-ray diffraction images.",
        ),
        Question(
            "What is the approximate age of the universe?",
            ("4.5 billion years", "13.8 billion years", "10.2 billion years", "16.4 billion years"),
            "13.8 billion years",
            "Science",
            "The universe is approximately 13.8 billion years old, based on measurements of the cosmic microwave background radiation.",
        ),
        Question(
            "Who wrote 'The Brothers Karamazov'?",
            ("Leo Tolstoy", "Fyodor Dostoevsky", "Anton Chekhov", "Ivan Turgenev"),
            "Fyodor Dostoevsky",
            "Literature",
            "Fyodor Dostoevsky wrote 'The Brothers Karamazov' in 1880, his final novel exploring faith, doubt, and morality.",
        ),
        Question(
            "What is the chemical symbol for lead?",
            ("Ld", "Pb", "Pl", "Le"),
            "Pb",
            "Science",
            "Pb comes from the Latin word for lead, 'plumbum'. Lead has been used since ancient times for pipes and weights.",
        ),
        Question(
            "Which composer wrote 'The Rite of Spring'?",
            ("Stravinsky", "Debussy", "Ravel", "Shostakovich"),
            "Stravinsky",
            "Music",
            "Igor Stravinsky composed 'The Rite of Spring' in 1913, which caused a riot at its premiere due to its avant-garde nature.",
        ),
        Question(
            "What is the capital of Myanmar?",
            ("Yangon", "Naypyidaw", "Mandalay", "Bangkok"),
            "Naypyidaw",
            "Geography",
            "Naypyidaw became the capital of Myanmar in 2006, replacing Yangon. It was built from scratch in a central location.",
        ),
    ],
}
