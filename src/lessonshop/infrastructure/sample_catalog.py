"""Built-in sample catalog used by ``lessonshop seed``."""

SAMPLE_LESSONS = [
    {
        "subject": "Mathematics",
        "location": "Hendon",
        "instructor": "Dr. Amara Okafor",
        "description": "Algebra, fractions and problem solving for ages 10-14.",
        "schedule": "Mondays 16:00-17:00",
        "price": 100,
        "spaces": 5,
        "image": "image/math.png",
    },
    {
        "subject": "English",
        "location": "Colindale",
        "instructor": "Ms. Priya Shah",
        "description": "Creative writing and reading comprehension.",
        "schedule": "Tuesdays 16:00-17:00",
        "price": 90,
        "spaces": 5,
        "image": "image/english.png",
    },
    {
        "subject": "Science",
        "location": "Brent Cross",
        "instructor": "Mr. Tomas Novak",
        "description": "Hands-on experiments in chemistry and physics.",
        "schedule": "Wednesdays 15:30-17:00",
        "price": 110,
        "spaces": 5,
        "image": "image/science.png",
    },
    {
        "subject": "Music",
        "location": "Golders Green",
        "instructor": "Ms. Ines Duarte",
        "description": "Piano and music theory for beginners.",
        "schedule": "Thursdays 17:00-18:00",
        "price": 80,
        "spaces": 5,
        "image": "image/music.png",
    },
    {
        "subject": "Art",
        "location": "Mill Hill",
        "instructor": "Mr. Kenji Watanabe",
        "description": "Drawing, painting and basic sculpture.",
        "schedule": "Fridays 16:00-17:30",
        "price": 75,
        "spaces": 5,
        "image": "image/art.png",
    },
    {
        "subject": "Football",
        "location": "Gym",
        "instructor": "Coach Sam Reilly",
        "description": "Ball control, passing and team play.",
        "schedule": "Saturdays 10:00-11:30",
        "price": 60,
        "spaces": 5,
        "image": "image/football.png",
    },
    {
        "subject": "Coding",
        "location": "Hendon",
        "instructor": "Ms. Leila Haddad",
        "description": "Intro to Python with games and puzzles.",
        "schedule": "Saturdays 12:00-13:30",
        "price": 120,
        "spaces": 5,
        "image": "image/coding.png",
    },
    {
        "subject": "Chess",
        "location": "Colindale",
        "instructor": "Mr. Viktor Petrov",
        "description": "Openings, tactics and endgames; basic math skills helpful.",
        "schedule": "Sundays 11:00-12:00",
        "price": 50,
        "spaces": 5,
        "image": "image/chess.png",
    },
    {
        "subject": "French",
        "location": "Golders Green",
        "instructor": "Mme. Claire Dubois",
        "description": "Conversational French through songs and role play.",
        "schedule": "Sundays 13:00-14:00",
        "price": 85,
        "spaces": 5,
        "image": "image/french.png",
    },
    {
        "subject": "Drama",
        "location": "Mill Hill",
        "instructor": "Mr. Daniel Mensah",
        "description": "Voice, movement and short scene performance.",
        "schedule": "Sundays 15:00-16:30",
        "price": 70,
        "spaces": 5,
        "image": "image/drama.png",
    },
]
